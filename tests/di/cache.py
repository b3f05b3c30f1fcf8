"""Mock cache providers for testing."""

from dishka import Scope, provide

from board.adapter.cache import InMemoryCacheBackend
from board.domain.service import CacheBackend
from board.util.di.infrastructure.cache import CacheProvider


class MockCacheProvider(CacheProvider):
    """In-memory cache. Tests fetch InMemoryCacheBackend to simulate outages."""

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_in_memory_backend(self) -> InMemoryCacheBackend:
        return InMemoryCacheBackend()

    @provide
    def get_cache_backend(self, backend: InMemoryCacheBackend) -> CacheBackend:
        return backend
