"""Create comment use case."""

import asyncio
from typing import Awaitable
from uuid import UUID

import logfire
from pydantic import BaseModel, Field, field_validator

from board.application.usecase.base import BaseUseCase
from board.application.usecase.comment.dto import CommentDto
from board.config import CaptchaSettings
from board.domain.error import ValidationError
from board.domain.model import Comment
from board.domain.service import (
    CaptchaService,
    CommentBroadcaster,
    CommentCreatedEvent,
    CommentEventPublisher,
    CommentPageCache,
    CommentService,
    HtmlSanitizer,
    UserService,
)
from board.domain.value import CommentId, Email, HomePage, UserName


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    user_name: UserName
    email: Email
    home_page: HomePage | None = None
    text: str = Field(min_length=1, max_length=10000)
    captcha_token: str | None = None
    parent_comment_id: UUID | None = None
    image_path: str | None = Field(default=None, max_length=500)
    text_file_path: str | None = Field(default=None, max_length=500)
    origin_address: str = "unknown"  # From the transport, not the client
    client_signature: str = ""  # User-Agent

    @field_validator("home_page", mode="before")
    @classmethod
    def blank_home_page_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CreateCommentUseCase(BaseUseCase):
    """Use case for posting a comment or a reply."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        captcha_service: CaptchaService,
        sanitizer: HtmlSanitizer,
        page_cache: CommentPageCache,
        broadcaster: CommentBroadcaster,
        publisher: CommentEventPublisher,
        captcha_settings: CaptchaSettings,
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service
        self.captcha_service = captcha_service
        self.sanitizer = sanitizer
        self.page_cache = page_cache
        self.broadcaster = broadcaster
        self.publisher = publisher
        self.captcha_settings = captcha_settings

    async def execute(self, request: CreateCommentRequest) -> CommentDto:
        """Execute create comment flow.

        Steps:
        1. Spend the verified CAPTCHA token
        2. Sanitize the body
        3. Resolve the author by email, creating them if new
        4. Persist the comment (parent must exist)
        5. Invalidate cached pages
        6. Broadcast and publish, both best-effort

        Args:
            request: Create comment request

        Returns:
            The created comment with no replies

        Raises:
            ValidationError: Unverified CAPTCHA, empty body or unknown parent
            IntegrityError: If the stored comment has no author
            StoreUnavailableError: If the store can't be reached
            CacheUnavailableError: If the CAPTCHA can't be checked
        """
        with logfire.span(
            "create_comment",
            email=request.email.root,
            parent_comment_id=(
                str(request.parent_comment_id) if request.parent_comment_id else None
            ),
        ):
            if self.captcha_settings.require_on_create:
                if not request.captcha_token or not await self.captcha_service.redeem(
                    request.captcha_token
                ):
                    raise ValidationError("CAPTCHA has not been verified")

            text = self.sanitizer.sanitize(request.text)
            if not text.strip():
                raise ValidationError("Comment text is empty")

            author = await self.user_service.resolve_or_create(
                user_name=request.user_name,
                email=request.email,
                home_page=request.home_page,
                ip_address=request.origin_address,
                user_agent=request.client_signature,
            )
            comment = await self.comment_service.create_comment(
                author=author,
                text=text,
                parent_id=(
                    CommentId(request.parent_comment_id)
                    if request.parent_comment_id
                    else None
                ),
                image_path=request.image_path,
                text_file_path=request.text_file_path,
            )
            dto = CommentDto.from_comment(comment)

            # Before notifying, so clients reacting to the push read fresh pages
            await self.page_cache.invalidate()
            await self._notify(comment, dto)
            return dto

    async def _notify(self, comment: Comment, dto: CommentDto) -> None:
        event = CommentCreatedEvent(
            comment_id=comment.id,
            user_id=comment.user_id,
            parent_comment_id=comment.parent_id,
            created_at=comment.created_at,
        )
        await asyncio.gather(
            self._best_effort(
                "broadcast",
                comment,
                self.broadcaster.broadcast_comment(
                    dto.model_dump(mode="json", by_alias=True)
                ),
            ),
            self._best_effort(
                "publish", comment, self.publisher.publish_comment_created(event)
            ),
        )

    @staticmethod
    async def _best_effort(
        name: str, comment: Comment, operation: Awaitable[None]
    ) -> None:
        try:
            await operation
        except Exception as e:
            logfire.warn(
                "Comment side effect failed",
                side_effect=name,
                comment_id=str(comment.id),
                error=str(e),
                error_type=type(e).__name__,
            )
