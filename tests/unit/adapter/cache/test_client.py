"""Unit tests for cache backends."""

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from board.adapter.cache import InMemoryCacheBackend, RedisCacheBackend
from board.domain.error import CacheUnavailableError


class UnreachableRedis:
    """Stand-in client whose every command fails like a dead server."""

    async def get(self, key):
        raise RedisConnectionError("Connection refused")

    async def set(self, key, value, ex=None):
        raise RedisTimeoutError("Timeout reading from socket")

    async def delete(self, key):
        raise OSError("Network is unreachable")

    async def getdel(self, key):
        raise RedisConnectionError("Connection reset by peer")


class RecordingRedis:
    """Stand-in client that remembers SET arguments."""

    def __init__(self):
        self.calls = []

    async def set(self, key, value, ex=None):
        self.calls.append((key, value, ex))

    async def getdel(self, key):
        self.calls.append(("GETDEL", key))
        return "stored"


class TestRedisCacheBackend:
    """Error mapping and argument passing."""

    @pytest.mark.asyncio
    async def test_get_failure_is_cache_unavailable(self):
        backend = RedisCacheBackend(UnreachableRedis())

        with pytest.raises(CacheUnavailableError):
            await backend.get("k")

    @pytest.mark.asyncio
    async def test_set_timeout_is_cache_unavailable(self):
        backend = RedisCacheBackend(UnreachableRedis())

        with pytest.raises(CacheUnavailableError):
            await backend.set("k", "v", 10)

    @pytest.mark.asyncio
    async def test_remove_os_error_is_cache_unavailable(self):
        backend = RedisCacheBackend(UnreachableRedis())

        with pytest.raises(CacheUnavailableError):
            await backend.remove("k")

    @pytest.mark.asyncio
    async def test_ttl_is_passed_as_ex(self):
        """TTL maps to SET ... EX; None means no expiry."""
        client = RecordingRedis()
        backend = RedisCacheBackend(client)

        await backend.set("a", "1", 30)
        await backend.set("b", "2")

        assert client.calls == [("a", "1", 30), ("b", "2", None)]

    @pytest.mark.asyncio
    async def test_pop_uses_getdel(self):
        client = RecordingRedis()
        backend = RedisCacheBackend(client)

        assert await backend.pop("k") == "stored"
        assert client.calls == [("GETDEL", "k")]

    @pytest.mark.asyncio
    async def test_pop_failure_is_cache_unavailable(self):
        backend = RedisCacheBackend(UnreachableRedis())

        with pytest.raises(CacheUnavailableError):
            await backend.pop("k")


class TestInMemoryCacheBackend:
    """Expiry and outage simulation."""

    @pytest.mark.asyncio
    async def test_entry_expires_at_ttl(self):
        now = [100.0]
        backend = InMemoryCacheBackend(clock=lambda: now[0])
        await backend.set("k", "v", ttl_seconds=5)

        now[0] = 104.9
        assert await backend.get("k") == "v"

        now[0] = 105.0
        assert await backend.get("k") is None
        assert "k" not in backend.keys()

    @pytest.mark.asyncio
    async def test_no_ttl_never_expires(self):
        now = [0.0]
        backend = InMemoryCacheBackend(clock=lambda: now[0])
        await backend.set("k", "v")

        now[0] = 1e9

        assert await backend.get("k") == "v"

    @pytest.mark.asyncio
    async def test_remove(self):
        backend = InMemoryCacheBackend()
        await backend.set("k", "v")

        await backend.remove("k")
        await backend.remove("missing")

        assert await backend.get("k") is None

    @pytest.mark.asyncio
    async def test_pop_returns_value_once(self):
        backend = InMemoryCacheBackend()
        await backend.set("k", "v")

        assert await backend.pop("k") == "v"
        assert await backend.pop("k") is None
        assert "k" not in backend.keys()

    @pytest.mark.asyncio
    async def test_pop_expired_entry_is_none(self):
        now = [0.0]
        backend = InMemoryCacheBackend(clock=lambda: now[0])
        await backend.set("k", "v", ttl_seconds=5)

        now[0] = 10.0

        assert await backend.pop("k") is None

    @pytest.mark.asyncio
    async def test_unavailable_raises(self):
        backend = InMemoryCacheBackend()
        backend.available = False

        with pytest.raises(CacheUnavailableError):
            await backend.get("k")
