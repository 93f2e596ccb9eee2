"""Cache helpers for resolved content."""

from __future__ import annotations

import functools
import logging
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, TypeVar

if TYPE_CHECKING:
    from zennbook.context import AppContext

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Types for cache storage. Values are either resolved content or a
# ``ContentError``; both are kept until forcibly recomputed.
CacheKey = str
CacheStore = Dict[CacheKey, Any]
Loader = Callable[["AppContext", PurePath], Awaitable[T]]
CachedLoader = Callable[..., Awaitable[T]]


class ContentCache:
    """In-memory store of resolution outcomes keyed by content kind and path.

    Entries never expire on their own. Passing ``force=True`` to
    ``get_or_compute`` is the way to refresh one.
    """

    def __init__(self) -> None:
        self._store: CacheStore = {}

    @staticmethod
    def create_key(kind: str, uri: PurePath) -> CacheKey:
        """Return the cache key for ``uri`` loaded as ``kind``.

        Args:
            kind: Content kind tag such as ``"book"``.
            uri: Resource the content is loaded from.

        Returns:
            Key unique to the pair, so the same path loaded as two kinds
            produces two entries.
        """

        return f"{kind}:{uri.as_posix()}"

    async def get_or_compute(
        self,
        key: CacheKey,
        compute: Callable[[], Awaitable[T]],
        force: bool = False,
    ) -> T:
        """Return the cached value for ``key`` or compute and store it.

        Args:
            key: Cache key, usually from ``create_key``.
            compute: Coroutine factory producing the value on a miss.
            force: Ignore any stored value and recompute.

        Returns:
            The stored or freshly computed value.
        """

        # Return cached entry unless a refresh was requested.
        if not force and key in self._store:
            logger.debug(f"Cache hit for {key}")
            return self._store[key]

        logger.debug(f"Computing {key} (force={force})")
        value = await compute()

        # Concurrent computations of the same key overwrite each other.
        self._store[key] = value
        return value

    def invalidate(self, key: CacheKey) -> None:
        """Drop the entry for ``key`` if present."""

        self._store.pop(key, None)

    def clear(self) -> None:
        """Drop every entry."""

        self._store.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)


def cached(kind: str) -> Callable[[Loader[T]], CachedLoader[T]]:
    """Route a ``(context, uri)`` loader through ``context.cache``.

    The decorated coroutine accepts an extra ``force`` argument that is
    passed to ``ContentCache.get_or_compute``.

    Args:
        kind: Content kind tag used to build the cache key.

    Returns:
        Decorator producing the cached loader.
    """

    def decorator(loader: Loader[T]) -> CachedLoader[T]:
        @functools.wraps(loader)
        async def wrapper(
            context: AppContext, uri: PurePath, force: bool = False
        ) -> T:
            key = context.cache.create_key(kind, uri)
            return await context.cache.get_or_compute(
                key, lambda: loader(context, uri), force
            )

        return wrapper

    return decorator
