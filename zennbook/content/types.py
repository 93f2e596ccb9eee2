"""Common type aliases for content structures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .chapter_meta import BookChapterMeta  # noqa: F401
    from .preview import PreviewChapterMeta  # noqa: F401


StrList = list[str]
BookChapterMetaList = tuple["BookChapterMeta", ...]
PreviewChapterMetaList = tuple["PreviewChapterMeta", ...]
