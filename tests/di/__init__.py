"""Mock providers for testing."""

from .cache import MockCacheProvider
from .persistence import MockPersistenceProvider
from .queue import MockQueueProvider
from .realtime import MockRealtimeProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockCacheProvider",
    "MockPersistenceProvider",
    "MockQueueProvider",
    "MockRealtimeProvider",
    "MockStorageProvider",
    "build_test_container",
]
