"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.attachment import (
    UploadImageUseCase,
    UploadTextFileUseCase,
)
from board.application.usecase.captcha import (
    IssueCaptchaUseCase,
    ValidateCaptchaUseCase,
)
from board.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
    PreviewCommentUseCase,
)
from board.config import CaptchaSettings, PaginationSettings
from board.domain.service import (
    AttachmentService,
    CaptchaService,
    CommentBroadcaster,
    CommentEventPublisher,
    CommentPageCache,
    CommentService,
    HtmlSanitizer,
    UserService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_comments_use_case(
        self,
        comment_service: CommentService,
        page_cache: CommentPageCache,
        pagination: PaginationSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            page_cache=page_cache,
            pagination=pagination,
        )

    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        captcha_service: CaptchaService,
        sanitizer: HtmlSanitizer,
        page_cache: CommentPageCache,
        broadcaster: CommentBroadcaster,
        publisher: CommentEventPublisher,
        captcha_settings: CaptchaSettings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            captcha_service=captcha_service,
            sanitizer=sanitizer,
            page_cache=page_cache,
            broadcaster=broadcaster,
            publisher=publisher,
            captcha_settings=captcha_settings,
        )

    @provide
    def get_preview_comment_use_case(
        self, sanitizer: HtmlSanitizer
    ) -> PreviewCommentUseCase:
        """Provide preview comment use case."""
        return PreviewCommentUseCase(sanitizer=sanitizer)

    # Captcha use cases
    @provide
    def get_issue_captcha_use_case(
        self, captcha_service: CaptchaService
    ) -> IssueCaptchaUseCase:
        """Provide issue captcha use case."""
        return IssueCaptchaUseCase(captcha_service=captcha_service)

    @provide
    def get_validate_captcha_use_case(
        self, captcha_service: CaptchaService
    ) -> ValidateCaptchaUseCase:
        """Provide validate captcha use case."""
        return ValidateCaptchaUseCase(captcha_service=captcha_service)

    # Attachment use cases
    @provide
    def get_upload_image_use_case(
        self, attachment_service: AttachmentService
    ) -> UploadImageUseCase:
        """Provide upload image use case."""
        return UploadImageUseCase(attachment_service=attachment_service)

    @provide
    def get_upload_text_file_use_case(
        self, attachment_service: AttachmentService
    ) -> UploadTextFileUseCase:
        """Provide upload text file use case."""
        return UploadTextFileUseCase(attachment_service=attachment_service)
