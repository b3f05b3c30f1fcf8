"""Cache adapters."""

from .client import InMemoryCacheBackend, RedisCacheBackend

__all__ = [
    "InMemoryCacheBackend",
    "RedisCacheBackend",
]
