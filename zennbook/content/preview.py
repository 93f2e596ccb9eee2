"""Flat preview documents for a single book."""

from __future__ import annotations

import asyncio
from pathlib import PurePath
from typing import Any, Callable

import attrs
from attrs import define, field

from zennbook.context import AppContext

from .book import BOOK_KIND, Book, load_book_content
from .chapter import load_book_chapter_content
from .chapter_meta import BookChapterMeta
from .error import is_error
from .types import PreviewChapterMetaList

PathMapper = Callable[[PurePath], str]


def to_path(uri: PurePath) -> str:
    """Return ``uri`` as a posix path string."""

    return uri.as_posix()


@define(frozen=True, slots=True)
class PresentationContext:
    """Maps resources to paths the presentation layer can address.

    Attributes:
        asset_path: Mapper for images such as the book cover.
        document_path: Mapper for the book and chapter paths.
    """

    asset_path: PathMapper = to_path
    document_path: PathMapper = to_path


@define(frozen=True, slots=True)
class PreviewChapterMeta:
    """Chapter entry of a book preview."""

    path: str
    slug: str
    title: str | None


@define(frozen=True, slots=True)
class BookPreviewContent:
    """Book preview handed to the presentation layer.

    Attributes:
        book: Merged book settings.
        path: Path of the book directory.
        filename: Name of the book directory.
        panel_title: Title of the preview panel.
        cover_image_path: Mapped cover image path, ``None`` without cover.
        chapters: Chapter entries in book order.
    """

    book: Book
    path: str
    filename: str
    panel_title: str
    cover_image_path: str | None = None
    chapters: PreviewChapterMetaList = field(factory=tuple)
    type: str = BOOK_KIND

    def to_dict(self) -> dict[str, Any]:
        """Return the preview as a JSON ready mapping."""

        data = attrs.asdict(self)
        data["book"] = self.book.to_dict()
        data["chapters"] = [attrs.asdict(c) for c in self.chapters]
        return data


async def _preview_chapter(
    context: AppContext,
    meta: BookChapterMeta,
    presentation: PresentationContext,
    force: bool,
) -> PreviewChapterMeta:
    chapter = await load_book_chapter_content(context, meta.uri, force)
    return PreviewChapterMeta(
        path=presentation.document_path(meta.uri),
        slug=meta.slug,
        # A chapter that fails to load keeps its entry without a title.
        title=None if is_error(chapter) else chapter.value.title,
    )


async def load_book_preview_content(
    context: AppContext,
    uri: PurePath,
    presentation: PresentationContext | None = None,
    force: bool = False,
) -> BookPreviewContent:
    """Build the preview document of a book.

    Args:
        context: Application context.
        uri: Book directory.
        presentation: Path mappers of the presentation layer.
        force: Reload the book and its chapters instead of using the cache.

    Returns:
        The preview with one entry per chapter, in book order.

    Raises:
        ContentError: If the book itself cannot be resolved.
    """

    presentation = presentation or PresentationContext()

    book = await load_book_content(context, uri, force)
    if is_error(book):
        raise book

    chapters = await asyncio.gather(
        *(
            _preview_chapter(context, meta, presentation, force)
            for meta in book.chapters
        )
    )

    return BookPreviewContent(
        book=book.value,
        path=presentation.document_path(book.uri),
        filename=book.filename,
        panel_title=f"{book.value.title or book.filename or 'book'} preview",
        cover_image_path=(
            presentation.asset_path(book.cover_image_uri)
            if book.cover_image_uri
            else None
        ),
        chapters=tuple(chapters),
    )
