"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from board.config import (
    CacheSettings,
    CaptchaSettings,
    PaginationSettings,
    QueueSettings,
    Settings,
    UploadSettings,
)
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Sections are exposed separately so services depend only on what they use.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_cache_settings(self, settings: Settings) -> CacheSettings:
        return settings.cache

    @provide
    def provide_queue_settings(self, settings: Settings) -> QueueSettings:
        return settings.queue

    @provide
    def provide_captcha_settings(self, settings: Settings) -> CaptchaSettings:
        return settings.captcha

    @provide
    def provide_upload_settings(self, settings: Settings) -> UploadSettings:
        return settings.uploads

    @provide
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        return settings.pagination
