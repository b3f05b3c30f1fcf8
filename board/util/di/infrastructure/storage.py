"""Attachment storage infrastructure providers."""

from dishka import Scope, provide

from board.adapter.storage import (
    LocalFileStorage,
    PillowCaptchaRenderer,
    PillowImageProcessor,
)
from board.config import UploadSettings
from board.domain.service import CaptchaRenderer, FileStorage, ImageProcessor
from board.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the local upload directory."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_file_storage(self, upload_settings: UploadSettings) -> FileStorage:
        """Provide local file storage."""
        return LocalFileStorage(
            directory=upload_settings.directory,
            url_prefix=upload_settings.url_prefix,
        )

    @provide
    def get_image_processor(self) -> ImageProcessor:
        """Provide Pillow image processor."""
        return PillowImageProcessor()

    @provide
    def get_captcha_renderer(self) -> CaptchaRenderer:
        """Provide Pillow CAPTCHA renderer."""
        return PillowCaptchaRenderer()
