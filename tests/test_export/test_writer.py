"""Tests for dumpvalue.export.writer -- atomic persistence and reading back."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from lxml import etree

from dumpvalue.exceptions import ExportError, ExportErrorKind
from dumpvalue.export.writer import (
    atomic_write_bytes,
    read_values,
    write_document,
    write_values,
)
from dumpvalue.export.document import build_document
from dumpvalue.models import NamedValue


def _leftovers(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir() if p.name.endswith(".tmp"))


# ---------------------------------------------------------------------------
# atomic_write_bytes
# ---------------------------------------------------------------------------


class TestAtomicWriteBytes:
    def test_creates_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.xml"
        atomic_write_bytes(target, b"data")
        assert target.read_bytes() == b"data"
        assert _leftovers(tmp_path) == []

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        target = tmp_path / "out.xml"
        target.write_bytes(b"a much longer previous content")
        atomic_write_bytes(target, b"new")
        assert target.read_bytes() == b"new"

    def test_missing_directory_not_created(self, tmp_path: Path) -> None:
        target = tmp_path / "missing" / "out.xml"
        with pytest.raises(OSError):
            atomic_write_bytes(target, b"data")
        assert not target.parent.exists()

    def test_cleans_up_on_rename_failure(self, tmp_path: Path) -> None:
        target = tmp_path / "out.xml"
        target.write_bytes(b"previous")
        with patch("dumpvalue.export.writer.os.replace", side_effect=OSError("boom")):
            with pytest.raises(OSError, match="boom"):
                atomic_write_bytes(target, b"new")
        assert target.read_bytes() == b"previous"
        assert _leftovers(tmp_path) == []

    def test_cleans_up_on_interrupt(self, tmp_path: Path) -> None:
        target = tmp_path / "out.xml"
        with patch("dumpvalue.export.writer.os.fsync", side_effect=KeyboardInterrupt):
            with pytest.raises(KeyboardInterrupt):
                atomic_write_bytes(target, b"new")
        assert not target.exists()
        assert _leftovers(tmp_path) == []

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
    def test_writes_through_symlink(self, tmp_path: Path) -> None:
        real = tmp_path / "real.xml"
        real.write_text("old")
        link = tmp_path / "link.xml"
        link.symlink_to(real)
        atomic_write_bytes(link, b"new")
        assert link.is_symlink()
        assert real.read_bytes() == b"new"
        assert _leftovers(tmp_path) == []

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
    def test_write_values_through_symlink(self, tmp_path: Path) -> None:
        real = tmp_path / "real.xml"
        real.write_text("old")
        link = tmp_path / "link.xml"
        link.symlink_to(real)
        write_values([NamedValue(name="a", value="b")], link)
        assert link.is_symlink()
        assert read_values(real) == [NamedValue(name="a", value="b")]

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_preserves_existing_mode(self, tmp_path: Path) -> None:
        target = tmp_path / "out.xml"
        target.write_bytes(b"old")
        os.chmod(target, 0o640)
        atomic_write_bytes(target, b"new")
        assert stat.S_IMODE(target.stat().st_mode) == 0o640

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_new_file_mode(self, tmp_path: Path) -> None:
        target = tmp_path / "out.xml"
        atomic_write_bytes(target, b"new")
        assert stat.S_IMODE(target.stat().st_mode) == 0o644


# ---------------------------------------------------------------------------
# write_values / write_document
# ---------------------------------------------------------------------------


class TestWriteValues:
    def test_writes_well_formed_document(self, tmp_path: Path, sample_values) -> None:
        target = tmp_path / "values.xml"
        result = write_values(sample_values, target)
        assert result == target
        root = etree.parse(str(target)).getroot()
        assert root.tag == "ValueDumper"
        assert [item.findtext("Name") for item in root] == ["MyValue", "MyValueNotInCDATA"]
        assert b"<Value><![CDATA[ValueContent]]></Value>" in target.read_bytes()
        assert b"<Value>some other content</Value>" in target.read_bytes()

    def test_accepts_string_path(self, tmp_path: Path, sample_values) -> None:
        target = tmp_path / "values.xml"
        assert write_values(sample_values, str(target)) == target
        assert target.is_file()

    def test_empty_items(self, tmp_path: Path) -> None:
        target = tmp_path / "empty.xml"
        write_values([], target)
        root = etree.parse(str(target)).getroot()
        assert root.tag == "ValueDumper"
        assert len(root) == 0

    def test_idempotent(self, tmp_path: Path, sample_values) -> None:
        target = tmp_path / "values.xml"
        write_values(sample_values, target)
        first = target.read_bytes()
        write_values(sample_values, target)
        assert target.read_bytes() == first

    def test_missing_directory_is_io_failure(self, tmp_path: Path, sample_values) -> None:
        target = tmp_path / "nope" / "values.xml"
        with pytest.raises(ExportError) as exc_info:
            write_values(sample_values, target)
        assert exc_info.value.kind == ExportErrorKind.IO_FAILURE
        assert exc_info.value.path == str(target)
        assert not target.exists()
        assert not target.parent.exists()

    def test_directory_destination_is_io_failure(self, tmp_path: Path, sample_values) -> None:
        target = tmp_path / "adir"
        target.mkdir()
        with pytest.raises(ExportError) as exc_info:
            write_values(sample_values, target)
        assert exc_info.value.kind == ExportErrorKind.IO_FAILURE
        assert target.is_dir()
        assert _leftovers(tmp_path) == []

    def test_io_failure_keeps_previous_file(self, tmp_path: Path, sample_values) -> None:
        target = tmp_path / "values.xml"
        write_values(sample_values, target)
        previous = target.read_bytes()
        with patch("dumpvalue.export.writer.os.replace", side_effect=OSError(28, "No space left on device")):
            with pytest.raises(ExportError) as exc_info:
                write_values([NamedValue(name="new", value="x")], target)
        assert exc_info.value.kind == ExportErrorKind.IO_FAILURE
        assert "No space left" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert target.read_bytes() == previous
        assert _leftovers(tmp_path) == []

    def test_encoding_failure_touches_nothing(self, tmp_path: Path) -> None:
        target = tmp_path / "values.xml"
        with pytest.raises(ExportError) as exc_info:
            write_values([NamedValue(name="bad", value="\x00")], target)
        assert exc_info.value.kind == ExportErrorKind.ENCODING_FAILURE
        assert list(tmp_path.iterdir()) == []

    def test_write_document(self, tmp_path: Path, sample_values) -> None:
        target = tmp_path / "values.xml"
        write_document(build_document(sample_values), target)
        assert read_values(target) == sample_values


# ---------------------------------------------------------------------------
# read_values
# ---------------------------------------------------------------------------


class TestReadValues:
    def test_round_trip_preserves_flags(self, tmp_path: Path) -> None:
        items = [
            NamedValue(name="a", value="x]]>y"),
            NamedValue(name="b", value="<tag> & more", literal_encoding=False),
            NamedValue(name="a", value="dup\r\nline"),
        ]
        target = tmp_path / "values.xml"
        write_values(items, target)
        assert read_values(target) == items

    def test_empty_document(self, tmp_path: Path) -> None:
        target = tmp_path / "values.xml"
        write_values([], target)
        assert read_values(target) == []

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ExportError) as exc_info:
            read_values(tmp_path / "missing.xml")
        assert exc_info.value.kind == ExportErrorKind.IO_FAILURE

    def test_malformed(self, tmp_path: Path) -> None:
        target = tmp_path / "bad.xml"
        target.write_text("<ValueDumper><ValueDumperItem>", encoding="utf-8")
        with pytest.raises(ExportError) as exc_info:
            read_values(target)
        assert exc_info.value.kind == ExportErrorKind.INVALID_DOCUMENT

    def test_wrong_root(self, tmp_path: Path) -> None:
        target = tmp_path / "other.xml"
        target.write_text("<Other />", encoding="utf-8")
        with pytest.raises(ExportError, match="Expected <ValueDumper>"):
            read_values(target)

    def test_item_without_name(self, tmp_path: Path) -> None:
        target = tmp_path / "noname.xml"
        target.write_text(
            "<ValueDumper><ValueDumperItem><Value>x</Value></ValueDumperItem></ValueDumper>",
            encoding="utf-8",
        )
        with pytest.raises(ExportError) as exc_info:
            read_values(target)
        assert exc_info.value.kind == ExportErrorKind.INVALID_DOCUMENT
