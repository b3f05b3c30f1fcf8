"""Infrastructure providers."""

# Import bases
from .cache import CacheProvider
from .persistence import PersistenceProvider
from .queue import QueueProvider
from .realtime import RealtimeProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .cache import ProdCacheProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .queue import ProdQueueProvider  # noqa: F401
from .realtime import ProdRealtimeProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "CacheProvider",
    "PersistenceProvider",
    "ProdCacheProvider",
    "ProdPersistenceProvider",
    "ProdQueueProvider",
    "ProdRealtimeProvider",
    "ProdStorageProvider",
    "QueueProvider",
    "RealtimeProvider",
    "StorageProvider",
]
