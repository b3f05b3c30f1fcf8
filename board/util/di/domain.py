"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import CacheSettings, CaptchaSettings, UploadSettings
from board.domain.repository import CommentRepository, UserRepository
from board.domain.service import (
    AttachmentService,
    CacheBackend,
    CaptchaRenderer,
    CaptchaService,
    CommentPageCache,
    CommentService,
    FileStorage,
    HtmlSanitizer,
    ImageProcessor,
    ThreadAssembler,
    UserService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_thread_assembler(self) -> ThreadAssembler:
        return ThreadAssembler()

    @provide
    def get_sanitizer(self) -> HtmlSanitizer:
        return HtmlSanitizer()

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        thread_assembler: ThreadAssembler,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            thread_assembler=thread_assembler,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_page_cache(
        self, backend: CacheBackend, cache_settings: CacheSettings
    ) -> CommentPageCache:
        """Provide the comment page cache policy."""
        return CommentPageCache(
            backend=backend, ttl_seconds=cache_settings.page_ttl_seconds
        )

    @provide
    def get_captcha_service(
        self,
        backend: CacheBackend,
        renderer: CaptchaRenderer,
        captcha_settings: CaptchaSettings,
    ) -> CaptchaService:
        """Provide captcha service backed by the shared cache."""
        return CaptchaService(
            backend=backend,
            renderer=renderer,
            code_length=captcha_settings.code_length,
            ttl_seconds=captcha_settings.ttl_seconds,
        )

    @provide
    def get_attachment_service(
        self,
        storage: FileStorage,
        image_processor: ImageProcessor,
        upload_settings: UploadSettings,
    ) -> AttachmentService:
        """Provide attachment service."""
        return AttachmentService(
            storage=storage,
            image_processor=image_processor,
            max_image_bytes=upload_settings.max_image_bytes,
            max_text_bytes=upload_settings.max_text_bytes,
            max_image_width=upload_settings.max_image_width,
            max_image_height=upload_settings.max_image_height,
        )
