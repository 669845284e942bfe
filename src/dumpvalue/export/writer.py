"""Persist value-dump documents atomically, and read them back.

:func:`write_values` is the exporter's entry point: it builds the document,
serializes it, and replaces the destination in a single step. The bytes are
written to a temporary file in the destination's directory which is then
renamed over the destination with ``os.replace``, so a reader sees either
the previous file or the complete new one, never a truncated document.

:func:`read_values` parses a dump file back into
:class:`~dumpvalue.models.NamedValue` records.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Union

from lxml import etree

from dumpvalue.exceptions import ExportError, ExportErrorKind
from dumpvalue.export.document import (
    ITEM_ELEMENT,
    NAME_ELEMENT,
    ROOT_ELEMENT,
    VALUE_ELEMENT,
    ExportDocument,
    build_document,
)
from dumpvalue.export.serializer import serialize_document
from dumpvalue.models import NamedValue

logger = logging.getLogger(__name__)

_DEFAULT_FILE_MODE = 0o644

PathLike = Union[str, os.PathLike]


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Write *data* to *path* atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. The directory is
    not created; a missing directory is an error. An existing file keeps
    its permission bits. A symlinked *path* is written through: the file it
    points to is replaced and the link is kept. On any failure the temp file
    is removed and the original exception is re-raised.
    """
    path = Path(os.path.realpath(path))
    try:
        mode = path.stat().st_mode & 0o7777
    except OSError:
        mode = _DEFAULT_FILE_MODE

    tmp_path: Optional[str] = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fd:
            tmp_path = fd.name
            fd.write(data)
            fd.flush()
            os.fsync(fd.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up the temp file on any error (including KeyboardInterrupt).
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


def write_document(document: ExportDocument, destination: PathLike) -> Path:
    """Serialize *document* and persist it at *destination*.

    Serialization completes before the filesystem is touched, so an
    encoding failure never leaves a file behind.

    Args:
        document: The document to write.
        destination: Target file path; created or overwritten.

    Returns:
        The destination as a :class:`~pathlib.Path`.

    Raises:
        ExportError: ``ENCODING_FAILURE`` if a value cannot be represented,
            ``IO_FAILURE`` if the file cannot be created, written, or
            renamed into place.
    """
    path = Path(destination)
    data = serialize_document(document)
    try:
        atomic_write_bytes(path, data)
    except OSError as exc:
        raise ExportError(
            f"Cannot write {path}: {exc.strerror or exc}",
            kind=ExportErrorKind.IO_FAILURE,
            path=str(path),
        ) from exc
    logger.debug("Wrote %d value(s), %d bytes to %s", len(document), len(data), path)
    return path


def write_values(items: Iterable[NamedValue], destination: PathLike) -> Path:
    """Export named values to an XML file at *destination*.

    Item order is preserved and duplicate names are kept. Writing the same
    items twice produces byte-identical files.

    Example::

        write_values(
            [
                NamedValue(name="MyValue", value="ValueContent"),
                NamedValue(name="Plain", value="a < b", literal_encoding=False),
            ],
            "values.xml",
        )

    Raises:
        ExportError: See :func:`write_document`.
    """
    return write_document(build_document(items), destination)


def read_values(source: PathLike) -> list[NamedValue]:
    """Read a value-dump document back into :class:`NamedValue` records.

    ``literal_encoding`` is set when the stored value contains a CDATA
    section.

    Raises:
        ExportError: ``IO_FAILURE`` if the file cannot be read,
            ``INVALID_DOCUMENT`` if it is not well-formed or not a
            value-dump document.
    """
    path = Path(source)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ExportError(
            f"Cannot read {path}: {exc.strerror or exc}",
            kind=ExportErrorKind.IO_FAILURE,
            path=str(path),
        ) from exc

    parser = etree.XMLParser(strip_cdata=False, resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        raise ExportError(
            f"Malformed value document {path}: {exc}",
            kind=ExportErrorKind.INVALID_DOCUMENT,
            path=str(path),
        ) from exc

    if root.tag != ROOT_ELEMENT:
        raise ExportError(
            f"Expected <{ROOT_ELEMENT}> root in {path}, found <{root.tag}>",
            kind=ExportErrorKind.INVALID_DOCUMENT,
            path=str(path),
        )

    values = []
    for node in root.iterchildren(ITEM_ELEMENT):
        name_node = node.find(NAME_ELEMENT)
        value_node = node.find(VALUE_ELEMENT)
        if name_node is None:
            raise ExportError(
                f"<{ITEM_ELEMENT}> without <{NAME_ELEMENT}> in {path}",
                kind=ExportErrorKind.INVALID_DOCUMENT,
                path=str(path),
            )
        value = ""
        literal = False
        if value_node is not None:
            value = value_node.text or ""
            literal = b"<![CDATA[" in etree.tostring(value_node)
        values.append(
            NamedValue(name=name_node.text or "", value=value, literal_encoding=literal)
        )
    return values
