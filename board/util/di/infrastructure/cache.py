"""Cache infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from board.adapter.cache import RedisCacheBackend
from board.config import CacheSettings
from board.domain.service import CacheBackend
from board.util.di.base import ProviderBase


class CacheProvider(ProviderBase):
    """Cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider using Redis."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_cache_backend(
        self, cache_settings: CacheSettings
    ) -> AsyncIterator[CacheBackend]:
        """Provide a Redis backend shared by page cache and captcha store."""
        backend = RedisCacheBackend.from_url(
            cache_settings.url,
            socket_timeout=cache_settings.socket_timeout,
            socket_connect_timeout=cache_settings.socket_connect_timeout,
        )
        yield backend
        await backend.close()
