"""Serialize an :class:`~dumpvalue.export.document.ExportDocument` to UTF-8 bytes.

The document shape is fixed, so it is rendered line by line rather than
through a generic tree serializer. This keeps the output byte-for-byte
deterministic (two-space indentation, ``\\n`` line endings, no namespace
declarations) and lets CDATA blocks be split where a value contains the
``]]>`` terminator.

Example output::

    <?xml version="1.0" encoding="utf-8"?>
    <ValueDumper>
      <ValueDumperItem>
        <Name>MyValue</Name>
        <Value><![CDATA[ValueContent]]></Value>
      </ValueDumperItem>
    </ValueDumper>
"""

from __future__ import annotations

import re

from dumpvalue.exceptions import ExportError, ExportErrorKind
from dumpvalue.export.document import (
    ITEM_ELEMENT,
    NAME_ELEMENT,
    VALUE_ELEMENT,
    EncodedText,
    EscapedText,
    ExportDocument,
    LiteralText,
)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
INDENT = "  "

_CDATA_OPEN = "<![CDATA["
_CDATA_CLOSE = "]]>"
_CARRIAGE_RETURN_REF = "&#xD;"

# Anything outside the XML 1.0 Char production.
_INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def escape_text(text: str) -> str:
    """Escape a string for use as an XML text node.

    ``\\r`` is written as a character reference since parsers would
    otherwise normalise it to ``\\n``.
    """
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("\r", _CARRIAGE_RETURN_REF)
    )


def wrap_cdata(text: str) -> str:
    """Wrap a string in one or more CDATA sections.

    An embedded ``]]>`` is split between two sections and an embedded
    ``\\r`` is emitted as a character reference between sections, so a
    parser always recovers the original string.
    """
    sections = []
    for chunk in text.split("\r"):
        body = chunk.replace(_CDATA_CLOSE, "]]" + _CDATA_CLOSE + _CDATA_OPEN + ">")
        sections.append(_CDATA_OPEN + body + _CDATA_CLOSE)
    return _CARRIAGE_RETURN_REF.join(sections)


def render_content(content: EncodedText) -> str:
    """Render item content according to its encoding."""
    if isinstance(content, LiteralText):
        return wrap_cdata(content.text)
    if isinstance(content, EscapedText):
        return escape_text(content.text)
    raise TypeError(f"Unsupported content type: {type(content).__name__}")


def _check_representable(text: str, field: str, index: int) -> None:
    match = _INVALID_XML_CHARS.search(text)
    if match is not None:
        raise ExportError(
            f"{field} of item {index} contains character U+{ord(match.group()):04X} "
            "which cannot be represented in XML",
            kind=ExportErrorKind.ENCODING_FAILURE,
        )


def render_document(document: ExportDocument) -> str:
    """Render the document as text, without encoding it.

    Raises:
        ExportError: With ``ENCODING_FAILURE`` if a name or value holds a
            character XML 1.0 cannot carry.
    """
    lines = [XML_DECLARATION]
    if not document.items:
        lines.append(f"<{document.root} />")
        return "\n".join(lines) + "\n"

    lines.append(f"<{document.root}>")
    for index, item in enumerate(document.items):
        _check_representable(item.name, "Name", index)
        _check_representable(item.content.text, "Value", index)
        lines.append(f"{INDENT}<{ITEM_ELEMENT}>")
        lines.append(
            f"{INDENT * 2}<{NAME_ELEMENT}>{escape_text(item.name)}</{NAME_ELEMENT}>"
        )
        lines.append(
            f"{INDENT * 2}<{VALUE_ELEMENT}>{render_content(item.content)}</{VALUE_ELEMENT}>"
        )
        lines.append(f"{INDENT}</{ITEM_ELEMENT}>")
    lines.append(f"</{document.root}>")
    return "\n".join(lines) + "\n"


def serialize_document(document: ExportDocument) -> bytes:
    """Render the document and encode it as UTF-8 (without a BOM).

    Raises:
        ExportError: With ``ENCODING_FAILURE`` if the document cannot be
            represented in UTF-8 XML.
    """
    text = render_document(document)
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ExportError(
            f"Document cannot be encoded as UTF-8: {exc}",
            kind=ExportErrorKind.ENCODING_FAILURE,
        ) from exc
