"""Load XML configuration files and locate configuration sections.

This module handles the I/O for configuration: it parses a file into an
lxml element tree and finds the blocks (``projectPlugins``, ``dumpValue``)
that the explicit parsers in :mod:`dumpvalue.parser.plugins` and
:mod:`dumpvalue.parser.tasks` turn into typed records.

The public functions are:

* :func:`load_config_document` -- Parse a configuration file.
* :func:`find_section` -- Locate a single required section.
* :func:`find_sections` -- Locate every section with a given tag.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from lxml import etree

from dumpvalue.exceptions import ConfigError, ConfigErrorKind


def _make_parser() -> etree.XMLParser:
    # Never resolve external entities or fetch DTDs from configuration files.
    return etree.XMLParser(resolve_entities=False, no_network=True)


def load_config_document(path: Union[str, Path]) -> etree._Element:
    """Parse an XML configuration file and return its root element.

    Args:
        path: Path to the configuration file.

    Returns:
        The root element. Comments are kept as nodes; section parsers skip
        them.

    Raises:
        ConfigError: ``NOT_FOUND`` if the file cannot be read,
            ``INVALID_DOCUMENT`` if it is empty or not well-formed XML.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigError(
            f"Configuration file not found: {file_path}",
            kind=ConfigErrorKind.NOT_FOUND,
        )

    try:
        content = file_path.read_bytes()
    except OSError as exc:
        raise ConfigError(
            f"Failed to read configuration file {file_path}: {exc}",
            kind=ConfigErrorKind.NOT_FOUND,
        ) from exc

    if not content.strip():
        raise ConfigError(
            f"Configuration file is empty: {file_path}",
            kind=ConfigErrorKind.INVALID_DOCUMENT,
        )

    try:
        return etree.fromstring(content, _make_parser())
    except etree.XMLSyntaxError as exc:
        raise ConfigError(
            f"Invalid XML in configuration file {file_path}: {exc}",
            kind=ConfigErrorKind.INVALID_DOCUMENT,
        ) from exc


def find_sections(root: etree._Element, tag: str) -> list[etree._Element]:
    """Return every element named *tag*, the root included, in document order."""
    return list(root.iter(tag))


def find_section(root: etree._Element, tag: str) -> etree._Element:
    """Return the first element named *tag* at or below *root*.

    Raises:
        ConfigError: With ``MISSING_ELEMENT`` if there is no such element.
    """
    sections = find_sections(root, tag)
    if not sections:
        raise ConfigError(
            f"No <{tag}> section found under <{root.tag}>",
            kind=ConfigErrorKind.MISSING_ELEMENT,
            element=tag,
        )
    return sections[0]
