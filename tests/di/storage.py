"""Mock storage providers for testing."""

from dishka import Scope, provide

from board.adapter.storage import (
    InMemoryFileStorage,
    PillowCaptchaRenderer,
    PillowImageProcessor,
)
from board.domain.service import CaptchaRenderer, FileStorage, ImageProcessor
from board.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Keeps uploads in memory; images and CAPTCHAs still go through Pillow."""

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_in_memory_storage(self) -> InMemoryFileStorage:
        return InMemoryFileStorage()

    @provide
    def get_file_storage(self, storage: InMemoryFileStorage) -> FileStorage:
        return storage

    @provide
    def get_image_processor(self) -> ImageProcessor:
        return PillowImageProcessor()

    @provide
    def get_captcha_renderer(self) -> CaptchaRenderer:
        return PillowCaptchaRenderer()
