"""Comment page cache.

Pages are cached under keys that embed a *generation* token. Writing a
new token under ``comments:generation`` makes every page cached before
it unreachable at once; stale entries simply age out through their TTL.
The cache is advisory: backend failures are logged and treated as misses.
"""

from abc import ABC, abstractmethod
from uuid import uuid4

import logfire

from board.domain.error import CacheUnavailableError
from board.domain.value import PageRequest

from .base import Service

GENERATION_KEY = "comments:generation"


class CacheBackend(ABC):
    """Key-value store with per-entry expiry.

    Implementations raise CacheUnavailableError on connection, timeout
    or protocol failures.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None if absent or expired."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        """Store a value. ``ttl_seconds=None`` keeps it until overwritten."""
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete a key if present."""
        pass

    @abstractmethod
    async def pop(self, key: str) -> str | None:
        """Atomically read and delete a key. None if absent or expired."""
        pass


class CommentPageCache(Service):
    """Read-through cache policy for paged comment threads."""

    def __init__(self, backend: CacheBackend, ttl_seconds: int) -> None:
        """Initialize page cache.

        Args:
            backend: Cache backend
            ttl_seconds: Lifetime of a cached page
        """
        self.backend = backend
        self.ttl_seconds = ttl_seconds

    @staticmethod
    def key_for(request: PageRequest, generation: str) -> str:
        """Deterministic cache key for one page under one generation."""
        ascending = "true" if request.ascending else "false"
        return (
            f"comments:v{generation}:page:{request.page}:size:{request.page_size}"
            f":sort:{request.sort_by.value}:asc:{ascending}"
        )

    async def page_key(self, request: PageRequest) -> str | None:
        """Resolve the key for ``request`` under the current generation.

        Returns:
            The cache key, or None when the cache can't be used right now
        """
        try:
            generation = await self.backend.get(GENERATION_KEY)
            if generation is None:
                generation = uuid4().hex
                await self.backend.set(GENERATION_KEY, generation)
        except CacheUnavailableError as e:
            logfire.warn(
                "Comment cache unavailable, bypassing",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None
        return self.key_for(request, generation)

    async def get_page(self, key: str) -> str | None:
        """Fetch a cached page payload; failures count as a miss."""
        try:
            return await self.backend.get(key)
        except CacheUnavailableError as e:
            logfire.warn(
                "Comment page cache read failed",
                key=key,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    async def put_page(self, key: str, payload: str) -> None:
        """Store a page payload; failures are logged and ignored."""
        try:
            await self.backend.set(key, payload, self.ttl_seconds)
        except CacheUnavailableError as e:
            logfire.warn(
                "Comment page cache write failed",
                key=key,
                error=str(e),
                error_type=type(e).__name__,
            )

    async def invalidate(self) -> None:
        """Retire every cached page by rotating the generation token.

        On failure, staleness is bounded by the page TTL.
        """
        generation = uuid4().hex
        try:
            await self.backend.set(GENERATION_KEY, generation)
            logfire.info("Comment page cache invalidated", generation=generation)
        except CacheUnavailableError as e:
            logfire.warn(
                "Comment page cache invalidation failed",
                error=str(e),
                error_type=type(e).__name__,
                ttl_seconds=self.ttl_seconds,
            )
