"""Chapter files with YAML front matter."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Any, Mapping, Union

from attrs import define, field

from zennbook.cache import cached
from zennbook.context import AppContext
from zennbook.yaml_utils import split_front_matter

from .book import config_mapping
from .chapter_meta import create_chapter_meta, strip_chapter_extension
from .error import ContentError

logger = logging.getLogger(__name__)

BOOK_CHAPTER_KIND = "book_chapter"

# Front matter keys mapped to ``BookChapter`` fields.
_KNOWN_KEYS = ("title", "free")


@define(frozen=True, slots=True)
class BookChapter:
    """Front matter of a chapter file.

    Attributes:
        slug: Chapter identifier derived from the file name.
        title: Chapter title.
        free: Whether the chapter is readable without purchase.
        extra: Other front matter keys.
    """

    slug: str
    title: str | None = None
    free: bool | None = None
    extra: dict[str, Any] = field(factory=dict, repr=False)

    @classmethod
    def from_mapping(
        cls, slug: str, data: Mapping[str, Any]
    ) -> "BookChapter":
        title = data.get("title")
        return cls(
            slug=slug,
            title=str(title) if title is not None else None,
            free=data.get("free"),
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )


@define(frozen=True, slots=True)
class BookChapterContent:
    """Resolved chapter file.

    Attributes:
        uri: Location of the chapter file.
        filename: Name of the chapter file.
        value: Parsed front matter.
        markdown: Chapter body without the front matter.
    """

    uri: PurePath
    filename: str
    value: BookChapter
    markdown: str = ""
    type: str = BOOK_CHAPTER_KIND


BookChapterLoadResult = Union[BookChapterContent, ContentError]


async def load_book_chapter(
    context: AppContext, uri: PurePath
) -> BookChapterContent:
    """Read a chapter file and parse its front matter.

    Raises:
        OSError: If the file cannot be read.
        Exception: Whatever ``context.parse_config`` raises for the front
            matter.
    """

    text = await context.fs.read_text(uri)
    front_matter, markdown = split_front_matter(text)
    data = (
        config_mapping(context.parse_config(front_matter), uri)
        if front_matter
        else {}
    )

    meta = create_chapter_meta(uri)
    slug = meta.slug if meta else strip_chapter_extension(uri.name)

    return BookChapterContent(
        uri=uri,
        filename=uri.name,
        value=BookChapter.from_mapping(slug, data),
        markdown=markdown,
    )


@cached(BOOK_CHAPTER_KIND)
async def load_book_chapter_content(
    context: AppContext, uri: PurePath
) -> BookChapterLoadResult:
    """Load a chapter, converting failures into a ``ContentError``.

    Args:
        context: Application context.
        uri: Chapter file.

    Returns:
        The resolved chapter or the error describing why it failed.
    """

    try:
        return await load_book_chapter(context, uri)
    except Exception as exc:
        logger.warning(f"Failed to load chapter {uri}: {exc}")
        return ContentError(f"Failed to load {uri.name or 'chapter'}", uri)
