"""Canonical Pydantic models shared across all dumpvalue modules.

The models fall into two groups:

**Configuration records** -- produced by the explicit parsers in
:mod:`dumpvalue.parser` from CruiseControl-style XML configuration:
    :class:`PluginLink` and :class:`DumpValueTaskConfig`.

**Export input** -- the values handed to the exporter:
    :class:`NamedValue`.

Records are frozen once constructed. The in-memory XML document model used
by the serializer is not here; it lives in :mod:`dumpvalue.export.document`.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PluginLink(BaseModel):
    """A project plugin link read from a ``projectPlugins`` section.

    Example::

        PluginLink(display_text="Build Report", url="ViewBuildReport.aspx")
    """

    model_config = ConfigDict(frozen=True)

    display_text: str = Field(description="Text shown for the link (linkText)")
    url: str = Field(description="Link target, not validated (linkUrl)")


class NamedValue(BaseModel):
    """A single value to be written by the exporter.

    Names need not be unique. When ``literal_encoding`` is true (the
    default) the value is written inside a CDATA block, otherwise as escaped
    text.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str = ""
    literal_encoding: bool = Field(
        default=True, description="Wrap the value in CDATA (valueInCDATA)"
    )


class DumpValueTaskConfig(BaseModel):
    """Typed configuration of one ``<dumpValue>`` task block.

    See Also:
        :func:`~dumpvalue.parser.tasks.parse_dump_value_task`: Builds this
        model from a configuration element.
        :class:`~dumpvalue.tasks.DumpValueTask`: Executes it.
    """

    model_config = ConfigDict(frozen=True)

    xml_file_name: str = Field(min_length=1, description="The XML file to write")
    description: Optional[str] = Field(
        default=None, description="Replaces the default start message"
    )
    items: list[NamedValue] = Field(default_factory=list)
