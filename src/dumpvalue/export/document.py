"""In-memory model of a value-dump XML document.

Building the document is a pure step separate from serialization and
persistence, so the shape of the output can be checked without touching
the filesystem.

The content of each item is an :data:`EncodedText`, a two-case union:

* :class:`LiteralText` -- copied into a CDATA block, never read as markup.
* :class:`EscapedText` -- written as an ordinary escaped text node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from dumpvalue.models import NamedValue

ROOT_ELEMENT = "ValueDumper"
ITEM_ELEMENT = "ValueDumperItem"
NAME_ELEMENT = "Name"
VALUE_ELEMENT = "Value"


@dataclass(frozen=True)
class LiteralText:
    text: str


@dataclass(frozen=True)
class EscapedText:
    text: str


EncodedText = Union[LiteralText, EscapedText]


@dataclass(frozen=True)
class ExportItem:
    name: str
    content: EncodedText


@dataclass(frozen=True)
class ExportDocument:
    """Ordered items under a single fixed root element."""

    items: tuple[ExportItem, ...] = ()
    root: str = ROOT_ELEMENT

    def __len__(self) -> int:
        return len(self.items)


def encode_value(item: NamedValue) -> EncodedText:
    """Pick the text encoding for a value from its ``literal_encoding`` flag."""
    if item.literal_encoding:
        return LiteralText(item.value)
    return EscapedText(item.value)


def build_document(items: Iterable[NamedValue]) -> ExportDocument:
    """Map named values to a document, preserving order and duplicates."""
    return ExportDocument(
        items=tuple(ExportItem(name=item.name, content=encode_value(item)) for item in items)
    )
