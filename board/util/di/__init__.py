"""Dependency injection wiring: provider registry and selection."""

from typing import Type

from board.util.di.application import ProdApplicationProvider
from board.util.di.base import Component, ProviderBase
from board.util.di.core import ProdConfigProvider
from board.util.di.domain import ProdDomainProvider
from board.util.di.infrastructure import (
    CacheProvider,
    PersistenceProvider,
    ProdCacheProvider,
    ProdPersistenceProvider,
    ProdQueueProvider,
    ProdRealtimeProvider,
    ProdStorageProvider,
    QueueProvider,
    RealtimeProvider,
    StorageProvider,
)
from board.util.error import DependencyInjectionError

# Wiring order: settings, then domain and use cases, then swappable components
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    CacheProvider,
    QueueProvider,
    StorageProvider,
    RealtimeProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve ``base`` to the provider class to instantiate.

    A base without subclasses is concrete and returned unchanged. Otherwise
    the subclass whose ``__is_mock__`` matches ``use_mock`` is chosen.

    Raises:
        DependencyInjectionError: If no subclass matches
    """
    candidates = base.__subclasses__()
    if not candidates:
        return base

    for candidate in candidates:
        if candidate.__is_mock__ == use_mock:
            return candidate

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(base.__mock_component__ or base.__name__, kind)


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "CacheProvider",
    "PersistenceProvider",
    "QueueProvider",
    "RealtimeProvider",
    "StorageProvider",
    # Infrastructure implementations
    "ProdCacheProvider",
    "ProdPersistenceProvider",
    "ProdQueueProvider",
    "ProdRealtimeProvider",
    "ProdStorageProvider",
]
