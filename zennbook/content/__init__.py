"""Content loaders for books and their chapters."""

from .book import (
    Book,
    BookContent,
    book_summary,
    load_book,
    load_book_content,
    load_book_contents,
)
from .chapter import BookChapter, BookChapterContent, load_book_chapter_content
from .chapter_meta import BookChapterMeta, ChapterPosition, create_chapter_meta
from .error import ContentError, ErrorKind, is_error
from .preview import (
    BookPreviewContent,
    PresentationContext,
    PreviewChapterMeta,
    load_book_preview_content,
)

__all__ = [
    "Book",
    "BookChapter",
    "BookChapterContent",
    "BookChapterMeta",
    "BookContent",
    "BookPreviewContent",
    "ChapterPosition",
    "ContentError",
    "ErrorKind",
    "PresentationContext",
    "PreviewChapterMeta",
    "book_summary",
    "create_chapter_meta",
    "is_error",
    "load_book",
    "load_book_chapter_content",
    "load_book_content",
    "load_book_contents",
    "load_book_preview_content",
]
