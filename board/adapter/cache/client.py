"""Cache backend clients."""

import time
from typing import Callable

import logfire
import redis.asyncio as redis
from redis.exceptions import RedisError

from board.domain.error import CacheUnavailableError
from board.domain.service import CacheBackend


class RedisCacheBackend(CacheBackend):
    """Redis-backed cache using SET with EX for expiry."""

    def __init__(self, client: redis.Redis) -> None:
        self.client = client

    @classmethod
    def from_url(
        cls,
        url: str,
        socket_timeout: float | None = None,
        socket_connect_timeout: float | None = None,
    ) -> "RedisCacheBackend":
        """Create a backend with its own connection pool.

        Args:
            url: Redis URL, e.g. redis://localhost:6379/0
            socket_timeout: Per-command timeout in seconds
            socket_connect_timeout: Connect timeout in seconds
        """
        client = redis.from_url(
            url,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_connect_timeout,
            decode_responses=True,
        )
        return cls(client)

    async def get(self, key: str) -> str | None:
        try:
            return await self.client.get(key)
        except (RedisError, OSError) as e:
            raise CacheUnavailableError(f"Redis GET failed: {e}") from e

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        try:
            await self.client.set(key, value, ex=ttl_seconds)
        except (RedisError, OSError) as e:
            raise CacheUnavailableError(f"Redis SET failed: {e}") from e

    async def remove(self, key: str) -> None:
        try:
            await self.client.delete(key)
        except (RedisError, OSError) as e:
            raise CacheUnavailableError(f"Redis DEL failed: {e}") from e

    async def pop(self, key: str) -> str | None:
        try:
            return await self.client.getdel(key)
        except (RedisError, OSError) as e:
            raise CacheUnavailableError(f"Redis GETDEL failed: {e}") from e

    async def close(self) -> None:
        """Release the connection pool."""
        await self.client.aclose()
        logfire.info("Redis cache closed")


class InMemoryCacheBackend(CacheBackend):
    """Process-local cache for tests and single-instance development.

    Set ``available = False`` to make every call raise
    CacheUnavailableError, simulating a cache outage.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[str, tuple[str, float | None]] = {}
        self._clock = clock
        self.available = True

    def _ensure_available(self) -> None:
        if not self.available:
            raise CacheUnavailableError("In-memory cache is marked unavailable")

    async def get(self, key: str) -> str | None:
        self._ensure_available()
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        self._ensure_available()
        expires_at = self._clock() + ttl_seconds if ttl_seconds is not None else None
        self._entries[key] = (value, expires_at)

    async def remove(self, key: str) -> None:
        self._ensure_available()
        self._entries.pop(key, None)

    async def pop(self, key: str) -> str | None:
        value = await self.get(key)
        self._entries.pop(key, None)
        return value

    def keys(self) -> list[str]:
        """Keys currently held, expired or not."""
        return list(self._entries)
