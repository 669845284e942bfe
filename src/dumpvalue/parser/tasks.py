"""Parse ``<dumpValue>`` task blocks into :class:`~dumpvalue.models.DumpValueTaskConfig`.

A task block names the file to write and the values to put in it::

    <dumpValue>
      <xmlFileName>somefile.xml</xmlFileName>
      <dumpValueItems>
        <dumpValueItem name="MyValue" value="ValueContent" />
        <dumpValueItem name="MyValueNotInCDATA" value="some other content"
                       valueInCDATA="false" />
      </dumpValueItems>
    </dumpValue>

Scalar properties may be given either as an attribute or as a child element
of the same name. An item's value may also be the item's own text.
"""

from __future__ import annotations

from typing import Any, Optional

from dumpvalue.exceptions import ConfigError, ConfigErrorKind
from dumpvalue.models import DumpValueTaskConfig, NamedValue
from dumpvalue.parser.plugins import is_element

TASK_ELEMENT = "dumpValue"
ITEMS_ELEMENT = "dumpValueItems"

_TRUE_VALUES = {"true"}
_FALSE_VALUES = {"false"}


def read_property(node: Any, name: str) -> Optional[str]:
    """Return property *name* from an attribute or a child element, or None."""
    value = node.get(name)
    if value is not None:
        return value
    for child in node:
        if is_element(child) and child.tag == name:
            return child.text or ""
    return None


def _required_property(node: Any, name: str) -> str:
    value = read_property(node, name)
    if value is None:
        raise ConfigError(
            f"<{node.tag}> is missing required attribute or element '{name}'",
            kind=ConfigErrorKind.MISSING_ATTRIBUTE,
            element=node.tag,
            attribute=name,
        )
    return value


def _parse_bool(node: Any, name: str, default: bool) -> bool:
    raw = read_property(node, name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"<{node.tag}> attribute '{name}' must be 'true' or 'false', got {raw!r}",
        kind=ConfigErrorKind.INVALID_VALUE,
        element=node.tag,
        attribute=name,
    )


def parse_dump_value_item(node: Any) -> NamedValue:
    """Parse one ``<dumpValueItem>`` element."""
    name = _required_property(node, "name")
    value = read_property(node, "value")
    if value is None:
        # <dumpValueItem name="x">content</dumpValueItem>
        value = node.text or ""
    return NamedValue(
        name=name,
        value=value,
        literal_encoding=_parse_bool(node, "valueInCDATA", default=True),
    )


def parse_dump_value_task(node: Any) -> DumpValueTaskConfig:
    """Parse a ``<dumpValue>`` element into its typed configuration.

    Args:
        node: An ElementTree-compatible ``dumpValue`` element.

    Returns:
        The task configuration. A missing ``dumpValueItems`` block yields
        an empty item list.

    Raises:
        ConfigError: ``MISSING_ATTRIBUTE`` when ``xmlFileName`` or an item
            ``name`` is absent, ``INVALID_VALUE`` for an empty file name or
            a ``valueInCDATA`` that is not a boolean.
    """
    xml_file_name = _required_property(node, "xmlFileName").strip()
    if not xml_file_name:
        raise ConfigError(
            f"<{node.tag}> has an empty 'xmlFileName'",
            kind=ConfigErrorKind.INVALID_VALUE,
            element=node.tag,
            attribute="xmlFileName",
        )

    items: list[NamedValue] = []
    for child in node:
        if is_element(child) and child.tag == ITEMS_ELEMENT:
            items.extend(
                parse_dump_value_item(item) for item in child if is_element(item)
            )

    return DumpValueTaskConfig(
        xml_file_name=xml_file_name,
        description=read_property(node, "description"),
        items=items,
    )
