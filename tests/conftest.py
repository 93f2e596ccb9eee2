"""Shared fixtures building books on an in-memory file system."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Callable, Mapping

import pytest

from zennbook.context import AppContext
from zennbook.fs import MemoryFileSystem

ROOT = PurePosixPath("/workspace")
BOOKS = ROOT / "books"

BookFactory = Callable[..., PurePosixPath]


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Return an empty virtual file system with a books folder."""

    fs = MemoryFileSystem()
    fs.add_directory(BOOKS)
    return fs


@pytest.fixture
def context(memory_fs: MemoryFileSystem) -> AppContext:
    """Return a context reading from ``memory_fs`` with a fresh cache."""

    return AppContext(root=ROOT, fs=memory_fs)


@pytest.fixture
def make_book(memory_fs: MemoryFileSystem) -> BookFactory:
    """Return a helper creating a book directory in ``memory_fs``.

    The helper accepts the directory name, the config text (``None`` to
    leave the config out) and a mapping of extra file names to contents.
    Files are added in mapping order.
    """

    def factory(
        name: str,
        config: str | None = "title: Book\n",
        files: Mapping[str, str] | None = None,
    ) -> PurePosixPath:
        book_dir = BOOKS / name
        memory_fs.add_directory(book_dir)
        if config is not None:
            memory_fs.add_file(book_dir / "config.yaml", config)
        for filename, text in (files or {}).items():
            memory_fs.add_file(book_dir / filename, text)
        return book_dir

    return factory
