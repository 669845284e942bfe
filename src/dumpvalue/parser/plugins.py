"""Parse a ``projectPlugins`` configuration section into plugin links.

The section lists one element per plugin; the element name is free, only
its ``linkText`` and ``linkUrl`` attributes matter::

    <projectPlugins>
      <!-- shown on the project page -->
      <plugin linkText="Build Report" linkUrl="ViewBuildReport.aspx" />
      <plugin linkText="Test Details" linkUrl="ViewTests.aspx" />
    </projectPlugins>
"""

from __future__ import annotations

from typing import Any

from dumpvalue.exceptions import ConfigError, ConfigErrorKind
from dumpvalue.models import PluginLink

LINK_TEXT_ATTRIBUTE = "linkText"
LINK_URL_ATTRIBUTE = "linkUrl"


def is_element(node: Any) -> bool:
    """Return True for element nodes.

    Both lxml and :mod:`xml.etree.ElementTree` give comments and
    processing instructions a non-string ``tag``.
    """
    return isinstance(node.tag, str)


def _required_attribute(node: Any, attribute: str) -> str:
    value = node.get(attribute)
    if value is None:
        raise ConfigError(
            f"<{node.tag}> is missing required attribute '{attribute}'",
            kind=ConfigErrorKind.MISSING_ATTRIBUTE,
            element=node.tag,
            attribute=attribute,
        )
    return value


def parse_project_plugins(section: Any) -> list[PluginLink]:
    """Read the plugin links listed under *section*, in document order.

    Args:
        section: An ElementTree-compatible element (lxml or stdlib).

    Returns:
        One :class:`~dumpvalue.models.PluginLink` per element child.

    Raises:
        ConfigError: With ``MISSING_ATTRIBUTE`` if an element child lacks
            ``linkText`` or ``linkUrl``.
    """
    links = []
    for node in section:
        if not is_element(node):
            continue
        links.append(
            PluginLink(
                display_text=_required_attribute(node, LINK_TEXT_ATTRIBUTE),
                url=_required_attribute(node, LINK_URL_ATTRIBUTE),
            )
        )
    return links
