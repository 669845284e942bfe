"""Value exporter -- build, serialize, and atomically persist value documents.

Typical usage::

    from dumpvalue.export import write_values
    from dumpvalue.models import NamedValue

    write_values([NamedValue(name="Build", value="42")], "values.xml")

Sub-modules:

* :mod:`~dumpvalue.export.document` -- Pure document model with the
  :data:`~dumpvalue.export.document.EncodedText` union.
* :mod:`~dumpvalue.export.serializer` -- Fixed-shape UTF-8 rendering with
  CDATA splitting and escaping.
* :mod:`~dumpvalue.export.writer` -- Temp-file-then-rename persistence and
  reading documents back.
"""

from dumpvalue.export.document import (
    EncodedText,
    EscapedText,
    ExportDocument,
    ExportItem,
    LiteralText,
    build_document,
)
from dumpvalue.export.serializer import serialize_document
from dumpvalue.export.writer import read_values, write_document, write_values

__all__ = [
    "EncodedText",
    "EscapedText",
    "ExportDocument",
    "ExportItem",
    "LiteralText",
    "build_document",
    "serialize_document",
    "read_values",
    "write_document",
    "write_values",
]
