"""Tests for the file system gateways."""

from __future__ import annotations

import asyncio
from pathlib import Path, PurePosixPath

import pytest

from zennbook.fs import FileType, LocalFileSystem, MemoryFileSystem


def test_local_file_system_lists_sorted_entries(tmp_path: Path) -> None:
    """Entries are sorted by name and typed."""

    (tmp_path / "b.md").write_text("B", encoding="utf-8")
    (tmp_path / "a").mkdir()
    (tmp_path / "c.yaml").write_text("", encoding="utf-8")

    entries = asyncio.run(LocalFileSystem().read_directory(tmp_path))

    assert entries == [
        ("a", FileType.DIRECTORY),
        ("b.md", FileType.FILE),
        ("c.yaml", FileType.FILE),
    ]


def test_local_file_system_reads_text(tmp_path: Path) -> None:
    """Files are decoded as UTF-8."""

    path = tmp_path / "config.yaml"
    path.write_text("title: 本\n", encoding="utf-8")

    assert asyncio.run(LocalFileSystem().read_text(path)) == "title: 本\n"


def test_local_file_system_missing_directory(tmp_path: Path) -> None:
    """Listing a missing directory raises ``OSError``."""

    with pytest.raises(OSError):
        asyncio.run(LocalFileSystem().read_directory(tmp_path / "none"))


def test_memory_file_system_keeps_insertion_order() -> None:
    """Entries are listed in the order they were added."""

    fs = MemoryFileSystem()
    root = PurePosixPath("/root")
    fs.add_file(root / "z.md", "z")
    fs.add_directory(root / "m")
    fs.add_file(root / "a.md", "a")
    fs.add_file(root / "m" / "nested.md", "n")

    entries = asyncio.run(fs.read_directory(root))

    assert entries == [
        ("z.md", FileType.FILE),
        ("m", FileType.DIRECTORY),
        ("a.md", FileType.FILE),
    ]
    assert asyncio.run(fs.read_text(root / "m" / "nested.md")) == "n"


def test_memory_file_system_missing_entries() -> None:
    """Unknown paths raise ``FileNotFoundError``."""

    fs = MemoryFileSystem()
    fs.add_file("/root/file.md", "text")

    with pytest.raises(FileNotFoundError):
        asyncio.run(fs.read_directory(PurePosixPath("/elsewhere")))
    with pytest.raises(FileNotFoundError):
        asyncio.run(fs.read_directory(PurePosixPath("/root/file.md")))
    with pytest.raises(FileNotFoundError):
        asyncio.run(fs.read_text(PurePosixPath("/root/other.md")))
