"""The ``dumpValue`` build task.

Writes values from the configuration file to an XML file so that a later
task can pick them up. This is most useful for dumping the dynamic values
created from build parameters. The file is UTF-8 encoded and, unless an
item says otherwise, each value is put in a CDATA section.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from dumpvalue.export import write_values
from dumpvalue.models import DumpValueTaskConfig
from dumpvalue.parser.tasks import parse_dump_value_task

logger = logging.getLogger(__name__)


class DumpValueTask:
    """Executes one ``<dumpValue>`` block.

    Args:
        config: The parsed task configuration.

    Example::

        task = DumpValueTask.from_element(node)
        written = task.run(working_directory=Path("/builds/project"))
    """

    def __init__(self, config: DumpValueTaskConfig) -> None:
        self._config = config

    @classmethod
    def from_element(cls, node: Any) -> "DumpValueTask":
        """Build a task from a ``<dumpValue>`` configuration element."""
        return cls(parse_dump_value_task(node))

    @property
    def config(self) -> DumpValueTaskConfig:
        return self._config

    def output_path(self, working_directory: Optional[Union[str, Path]] = None) -> Path:
        """Resolve ``xml_file_name`` against *working_directory* when relative."""
        path = Path(self._config.xml_file_name)
        if working_directory is not None and not path.is_absolute():
            path = Path(working_directory) / path
        return path

    def start_message(self) -> str:
        """Message reported when the task starts."""
        if self._config.description:
            return self._config.description
        return (
            f"Executing DumpValue: Dumping {len(self._config.items)} value(s) "
            f"into {self._config.xml_file_name}"
        )

    def run(self, working_directory: Optional[Union[str, Path]] = None) -> Path:
        """Write the configured values and return the file written.

        Raises:
            ExportError: Propagated unchanged from
                :func:`~dumpvalue.export.write_values`.
        """
        logger.info(self.start_message())
        return write_values(self._config.items, self.output_path(working_directory))
