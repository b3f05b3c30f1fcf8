"""Attachment storage adapters."""

from .files import InMemoryFileStorage, LocalFileStorage
from .images import PillowCaptchaRenderer, PillowImageProcessor, scaled_size

__all__ = [
    "InMemoryFileStorage",
    "LocalFileStorage",
    "PillowCaptchaRenderer",
    "PillowImageProcessor",
    "scaled_size",
]
