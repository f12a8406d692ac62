"""
Per-URL single-flight cache for capabilities documents.

The first request for a URL starts the load; later and concurrent
requests for the same URL await that same task, so every caller gets
the same document instance (or the same exception) and the server is
asked only once.

A failed load is dropped from the cache once it has settled, so the
next request for that URL starts over.
"""

import asyncio
from functools import partial
from typing import Awaitable, Callable, Generic, TypeVar

from wfs_catalog.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class CapabilitiesCache(Generic[T]):
    """Memoizes an async ``loader(url)`` by exact URL string."""

    def __init__(self, loader: Callable[[str], Awaitable[T]]) -> None:
        self._loader = loader
        self._entries: dict[str, asyncio.Future] = {}

    async def get(self, url: str) -> T:
        """
        Return the loaded value for ``url``, loading it at most once.

        The shared load is shielded: a caller that gets cancelled while
        waiting does not cancel the load for the other callers.
        """
        future = self._entries.get(url)
        if future is None:
            logger.debug("Cache MISS for url=%s, starting load", url)
            future = asyncio.ensure_future(self._loader(url))
            self._entries[url] = future
            future.add_done_callback(partial(self._on_done, url))
        else:
            logger.debug("Cache HIT for url=%s", url)

        return await asyncio.shield(future)

    def _on_done(self, url: str, future: asyncio.Future) -> None:
        if future.cancelled():
            failed = True
        else:
            exc = future.exception()
            failed = exc is not None
            if failed:
                logger.info("Load failed for url=%s, evicting: %s", url, exc)

        if failed and self._entries.get(url) is future:
            del self._entries[url]

    def __contains__(self, url: str) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Forget every entry. Loads in flight still finish for their waiters."""
        self._entries.clear()
