"""Chapter slug, position and inclusion derived from file names."""

from __future__ import annotations

import functools
import logging
import re
from pathlib import PurePath
from typing import Sequence

from attrs import define

logger = logging.getLogger(__name__)

CHAPTER_EXTENSION = ".md"

# ``<position>.<slug>`` prefix of a conventionally named chapter. The
# position must be a signed integer; an empty prefix (``.intro.md``) is
# malformed rather than position 0.
_POSITION = re.compile(r"[+-]?\d+")


@functools.total_ordering
@define(frozen=True, slots=True, order=False)
class ChapterPosition:
    """Position of a chapter: either ``ordered(index)`` or ``unordered``.

    Every ordered position sorts before the unordered one; ordered
    positions compare by index.

    Attributes:
        index: Integer position, ``None`` when unordered.
    """

    index: int | None = None

    @classmethod
    def ordered(cls, index: int) -> "ChapterPosition":
        return cls(index)

    @classmethod
    def unordered(cls) -> "ChapterPosition":
        return cls(None)

    @property
    def is_ordered(self) -> bool:
        return self.index is not None

    def sort_key(self) -> tuple[int, int]:
        return (0, self.index) if self.index is not None else (1, 0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ChapterPosition):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@define(frozen=True, slots=True)
class BookChapterMeta:
    """Chapter metadata shown in listings and previews.

    Attributes:
        slug: Identifier derived from the file name.
        uri: Location of the chapter file.
        position: Display position within the book.
    """

    slug: str
    uri: PurePath
    position: ChapterPosition

    @property
    def is_excluded(self) -> bool:
        """Whether the chapter is left out of the book."""

        return not self.position.is_ordered

    def sort_key(self) -> tuple[tuple[int, int], str, str]:
        """Key ordering chapters by position, then slug and file name."""

        return self.position.sort_key(), self.slug, self.uri.name


def strip_chapter_extension(filename: str) -> str:
    """Remove a trailing ``.md`` from ``filename``."""

    return filename.removesuffix(CHAPTER_EXTENSION)


def create_chapter_meta(
    uri: PurePath, slug_list: Sequence[str] | None = None
) -> BookChapterMeta | None:
    """Derive chapter metadata from the chapter file name.

    With a non-empty ``slug_list`` the chapter position is the index of its
    slug in that list. Otherwise the position is read from a
    ``<position>.<slug>.md`` file name.

    Args:
        uri: Location of the chapter file.
        slug_list: Explicit chapter order from the book config.

    Returns:
        Chapter metadata, or ``None`` when the file name has no slug.
    """

    slug = strip_chapter_extension(uri.name)
    if not slug:
        return None

    if slug_list:
        try:
            position = ChapterPosition.ordered(list(slug_list).index(slug))
        except ValueError:
            position = ChapterPosition.unordered()
        return BookChapterMeta(slug=slug, uri=uri, position=position)

    parts = slug.split(".")
    if len(parts) == 2 and _POSITION.fullmatch(parts[0]):
        return BookChapterMeta(
            slug=parts[1],
            uri=uri,
            position=ChapterPosition.ordered(int(parts[0])),
        )

    # Chapter without a usable ``<position>.<slug>`` name.
    logger.debug(f"Excluding chapter with malformed name: {uri}")
    return BookChapterMeta(
        slug=slug, uri=uri, position=ChapterPosition.unordered()
    )
