"""File system gateways used to read book trees."""

from __future__ import annotations

import asyncio
import enum
from pathlib import Path, PurePath, PurePosixPath
from typing import Protocol

# Directory entry as returned by ``read_directory``.
DirectoryEntry = tuple[str, "FileType"]
DirectoryEntryList = list[DirectoryEntry]


class FileType(enum.Enum):
    """Kind of a directory entry."""

    FILE = "file"
    DIRECTORY = "directory"


class FileSystemGateway(Protocol):
    """Asynchronous access to directory listings and text files."""

    async def read_directory(self, path: PurePath) -> DirectoryEntryList:
        """Return ``(name, type)`` pairs for the entries of ``path``."""
        ...

    async def read_text(self, path: PurePath) -> str:
        """Return the contents of the file at ``path``."""
        ...


class LocalFileSystem:
    """Gateway backed by the local disk.

    Blocking ``pathlib`` calls run in a worker thread so callers only
    suspend on I/O. Directory entries are sorted by name to keep the
    listing order stable across platforms.
    """

    async def read_directory(self, path: PurePath) -> DirectoryEntryList:
        return await asyncio.to_thread(self._list, Path(path))

    async def read_text(self, path: PurePath) -> str:
        return await asyncio.to_thread(Path(path).read_text, encoding="utf-8")

    @staticmethod
    def _list(path: Path) -> DirectoryEntryList:
        entries: DirectoryEntryList = []
        for child in sorted(path.iterdir(), key=lambda p: p.name):
            # Anything that is not a directory is reported as a file.
            kind = FileType.DIRECTORY if child.is_dir() else FileType.FILE
            entries.append((child.name, kind))
        return entries


class MemoryFileSystem:
    """Virtual file system holding text files in memory.

    Directories are created implicitly for every file parent. Listings keep
    insertion order, which lets tests control the order entries are seen.
    """

    def __init__(self) -> None:
        self._nodes: dict[PurePosixPath, FileType] = {}
        self._files: dict[PurePosixPath, str] = {}

    def add_directory(self, path: PurePath | str) -> None:
        """Register ``path`` and its parents as directories."""

        pure = PurePosixPath(path)
        for parent in reversed(pure.parents):
            self._nodes.setdefault(parent, FileType.DIRECTORY)
        self._nodes.setdefault(pure, FileType.DIRECTORY)

    def add_file(self, path: PurePath | str, text: str = "") -> None:
        """Store ``text`` at ``path``, creating parent directories."""

        pure = PurePosixPath(path)
        self.add_directory(pure.parent)
        self._nodes[pure] = FileType.FILE
        self._files[pure] = text

    async def read_directory(self, path: PurePath) -> DirectoryEntryList:
        pure = PurePosixPath(path)
        if self._nodes.get(pure) is not FileType.DIRECTORY:
            raise FileNotFoundError(f"No such directory: {pure}")

        return [
            (child.name, kind)
            for child, kind in self._nodes.items()
            if child != pure and child.parent == pure
        ]

    async def read_text(self, path: PurePath) -> str:
        pure = PurePosixPath(path)
        try:
            return self._files[pure]
        except KeyError:
            raise FileNotFoundError(f"No such file: {pure}") from None
