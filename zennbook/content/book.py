"""Resolve book directories into ``BookContent`` values."""

from __future__ import annotations

import asyncio
import logging
import re
from pathlib import PurePath
from typing import Any, Mapping, Union

import attrs
from attrs import define, field

from zennbook.cache import cached
from zennbook.context import AppContext
from zennbook.fs import DirectoryEntryList, FileType

from .chapter_meta import (
    CHAPTER_EXTENSION,
    BookChapterMeta,
    create_chapter_meta,
    strip_chapter_extension,
)
from .error import ContentError, ErrorKind, MissingConfigError
from .types import BookChapterMetaList, StrList

logger = logging.getLogger(__name__)

BOOK_KIND = "book"

_COVER_IMAGE = re.compile(r"cover\.(?:png|jpg|jpeg|webp)")
_CONFIG_FILE = re.compile(r"config\.(?:yaml|yml)")


@define(frozen=True, slots=True)
class Book:
    """Book settings read from ``config.yaml``.

    Every field is optional. Keys the record does not know about are kept
    in ``extra``.

    Attributes:
        slug: Book identifier, defaults to the directory name.
        title: Book title.
        summary: Short description.
        topics: Topic tags.
        price: Price of the book.
        published: Whether the book is public.
        chapters: Explicit chapter order as a list of chapter slugs.
        toc_depth: Depth of the table of contents.
        extra: Unknown config keys, passed through verbatim.
    """

    slug: str | None = None
    title: str | None = None
    summary: str | None = None
    topics: StrList | None = None
    price: float | int | None = None
    published: bool | None = None
    chapters: StrList | None = None
    toc_depth: int | None = None
    extra: dict[str, Any] = field(factory=dict, repr=False)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], default_slug: str | None = None
    ) -> "Book":
        """Merge parsed config data over the directory defaults.

        Args:
            data: Parsed config mapping.
            default_slug: Slug used when ``data`` has none.

        Returns:
            Book whose fields come from ``data`` where present.
        """

        names = {a.name for a in attrs.fields(cls)} - {"extra"}
        values: dict[str, Any] = {"slug": default_slug}
        values.update((k, v) for k, v in data.items() if k in names)
        values["chapters"] = _slug_list(values.get("chapters"))
        extra = {k: v for k, v in data.items() if k not in names}
        return cls(**values, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        """Return the config as a flat mapping with unknown keys merged."""

        data = attrs.asdict(self, filter=lambda a, _: a.name != "extra")
        return {**self.extra, **data}


def config_mapping(value: object, uri: PurePath) -> Mapping[str, Any]:
    """Return parsed config data as a mapping.

    Parsers may return lists or scalars; those carry no settings and are
    treated as an empty config.
    """

    if isinstance(value, Mapping):
        return value
    if value is not None:
        logger.warning(f"Ignoring non-mapping config in {uri}")
    return {}


def _slug_list(value: Any) -> StrList | None:  # noqa: ANN401
    """Normalize the ``chapters`` config value to a list of strings."""

    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        logger.warning(f"Ignoring non-list chapters setting: {value!r}")
        return None
    return [str(v) for v in value]


@define(frozen=True, slots=True)
class BookContent:
    """Resolved book directory.

    Attributes:
        uri: Book directory.
        filename: Name of the book directory.
        config_uri: Location of the config file.
        value: Merged book settings.
        chapters: Chapters sorted by position, excluded ones last.
        cover_image_uri: Location of the cover image if present.
    """

    uri: PurePath
    filename: str
    config_uri: PurePath
    value: Book
    chapters: BookChapterMetaList = field(factory=tuple)
    cover_image_uri: PurePath | None = None
    type: str = BOOK_KIND


BookLoadResult = Union[BookContent, ContentError]


def _find_cover_image_uri(
    uri: PurePath, files: DirectoryEntryList
) -> PurePath | None:
    for name, _ in files:
        if _COVER_IMAGE.fullmatch(name):
            return uri / name
    return None


def _find_config_uri(
    uri: PurePath, files: DirectoryEntryList
) -> PurePath | None:
    for name, _ in files:
        if _CONFIG_FILE.fullmatch(name):
            return uri / name
    return None


def _find_chapter_uris(
    uri: PurePath, files: DirectoryEntryList
) -> list[PurePath]:
    return [
        uri / name
        for name, kind in files
        if kind is FileType.FILE and name.endswith(CHAPTER_EXTENSION)
    ]


def sort_chapters(chapters: list[BookChapterMeta]) -> BookChapterMetaList:
    """Sort chapters by position with excluded chapters last.

    Ties are broken by slug and file name so the result does not depend on
    the order the directory was listed in.
    """

    return tuple(sorted(chapters, key=BookChapterMeta.sort_key))


async def load_book(context: AppContext, uri: PurePath) -> BookContent:
    """Read a book directory.

    Args:
        context: Application context providing the file system.
        uri: Book directory.

    Returns:
        The resolved book.

    Raises:
        MissingConfigError: If the directory has no config file.
        OSError: If the directory or config file cannot be read.
        Exception: Whatever ``context.parse_config`` raises for the config.
    """

    files = await context.fs.read_directory(uri)

    config_uri = _find_config_uri(uri, files)
    if config_uri is None:
        raise MissingConfigError(f"config.yaml is missing in {uri}")

    config = config_mapping(
        context.parse_config(await context.fs.read_text(config_uri)),
        config_uri,
    )

    filename = uri.name
    book = Book.from_mapping(
        config, default_slug=strip_chapter_extension(filename)
    )

    # Resolve every markdown file of the directory as a chapter.
    metas = [
        create_chapter_meta(chapter_uri, book.chapters)
        for chapter_uri in _find_chapter_uris(uri, files)
    ]

    return BookContent(
        uri=uri,
        filename=filename,
        config_uri=config_uri,
        value=book,
        chapters=sort_chapters([m for m in metas if m is not None]),
        cover_image_uri=_find_cover_image_uri(uri, files),
    )


@cached(BOOK_KIND)
async def load_book_content(
    context: AppContext, uri: PurePath
) -> BookLoadResult:
    """Load a book, converting failures into a ``ContentError``.

    The result is cached per book directory; pass ``force=True`` to reload.

    Args:
        context: Application context.
        uri: Book directory.

    Returns:
        The resolved book or the error describing why it failed.
    """

    name = uri.name or "book"
    try:
        return await load_book(context, uri)
    except MissingConfigError:
        logger.warning(f"Book {uri} has no config file")
        return ContentError(
            f"config.yaml is missing in {name}",
            uri,
            ErrorKind.MISSING_CONFIG,
        )
    except Exception as exc:
        logger.warning(f"Failed to load book {uri}: {exc}")
        return ContentError(f"Failed to load {name}", uri)


async def load_book_contents(
    context: AppContext, force: bool = False
) -> list[BookLoadResult]:
    """Load every book directory of the books folder.

    Books are loaded concurrently. A failing book yields a ``ContentError``
    in its slot without affecting the others.

    Args:
        context: Application context.
        force: Reload books even when cached.

    Returns:
        One result per book directory, in listing order.
    """

    root = context.books_folder
    entries = await context.fs.read_directory(root)
    directories = [
        root / name for name, kind in entries if kind is FileType.DIRECTORY
    ]

    return list(
        await asyncio.gather(
            *(load_book_content(context, uri, force) for uri in directories)
        )
    )


def book_summary(result: BookLoadResult) -> dict[str, Any]:
    """Summarize a book listing entry.

    Args:
        result: Loaded book or the error it failed with.

    Returns:
        Mapping suitable for JSON or YAML output.
    """

    if isinstance(result, ContentError):
        return result.to_dict()

    return {
        "type": result.type,
        "slug": result.value.slug,
        "title": result.value.title,
        "path": result.uri.as_posix(),
        "published": result.value.published,
        "cover": result.cover_image_uri is not None,
        "chapters": [
            {"slug": c.slug, "excluded": c.is_excluded}
            for c in result.chapters
        ],
    }
