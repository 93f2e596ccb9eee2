"""Application context shared by the content loaders."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Any, Callable

from attrs import define, field

from zennbook.cache import ContentCache
from zennbook.fs import FileSystemGateway, LocalFileSystem
from zennbook.yaml_utils import parse_yaml

# Environment variables read by ``AppContext.from_env``.
ROOT_ENV = "ZENNBOOK_ROOT"
BOOKS_DIR_ENV = "ZENNBOOK_BOOKS_DIR"

# Folder below the root that holds one directory per book.
DEFAULT_BOOKS_DIR = "books"

ConfigParser = Callable[[str], Any]


@define(slots=True)
class AppContext:
    """Collaborators and state used while resolving content.

    Attributes:
        root: Workspace root containing the books folder.
        fs: Gateway used for every directory listing and file read.
        cache: Store of resolution outcomes; lives as long as the context.
        books_dir: Name of the books folder below ``root``.
        parse_config: Structured text parser for config and front matter.
    """

    root: PurePath
    fs: FileSystemGateway = field(factory=LocalFileSystem)
    cache: ContentCache = field(factory=ContentCache)
    books_dir: str = DEFAULT_BOOKS_DIR
    parse_config: ConfigParser = parse_yaml

    @property
    def books_folder(self) -> PurePath:
        """Directory listing every book of the workspace."""

        return self.root / self.books_dir

    @classmethod
    def from_env(cls, root: PurePath | str | None = None) -> "AppContext":
        """Build a context for the local disk from environment variables.

        Args:
            root: Workspace root overriding ``ZENNBOOK_ROOT``. The current
                directory is used when neither is set.

        Returns:
            Context backed by ``LocalFileSystem`` with an empty cache.
        """

        root_path = Path(root or os.environ.get(ROOT_ENV) or Path.cwd())
        books_dir = os.environ.get(BOOKS_DIR_ENV, DEFAULT_BOOKS_DIR)
        return cls(root=root_path, books_dir=books_dir)
