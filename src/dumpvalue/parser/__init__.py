"""Configuration parsers -- load XML configuration and bind sections to typed records.

Each configuration block is turned into records by an explicit parsing
function rather than by reflection over attribute names.

Typical usage::

    from dumpvalue.parser import find_section, load_config_document
    from dumpvalue.parser import parse_project_plugins

    root = load_config_document("ccnet.config")
    links = parse_project_plugins(find_section(root, "projectPlugins"))

Sub-modules:

* :mod:`~dumpvalue.parser.loader` -- File I/O and section lookup.
* :mod:`~dumpvalue.parser.plugins` -- ``projectPlugins`` to
  :class:`~dumpvalue.models.PluginLink` records.
* :mod:`~dumpvalue.parser.tasks` -- ``dumpValue`` to
  :class:`~dumpvalue.models.DumpValueTaskConfig`.
"""

from dumpvalue.parser.loader import find_section, find_sections, load_config_document
from dumpvalue.parser.plugins import parse_project_plugins
from dumpvalue.parser.tasks import parse_dump_value_task

__all__ = [
    "find_section",
    "find_sections",
    "load_config_document",
    "parse_project_plugins",
    "parse_dump_value_task",
]
