"""Domain services."""

from .attachment_service import AttachmentService, FileStorage, ImageProcessor
from .base import Service
from .captcha_service import CaptchaChallenge, CaptchaRenderer, CaptchaService
from .comment_service import CommentService
from .notification import (
    CommentBroadcaster,
    CommentCreatedEvent,
    CommentEventPublisher,
)
from .page_cache import CacheBackend, CommentPageCache
from .sanitizer import HtmlSanitizer, sanitize
from .thread_assembler import (
    CommentNode,
    CommentThreadPage,
    ThreadAssembler,
    resolved_author,
)
from .user_service import UserService

__all__ = [
    "AttachmentService",
    "CacheBackend",
    "CaptchaChallenge",
    "CaptchaRenderer",
    "CaptchaService",
    "CommentBroadcaster",
    "CommentCreatedEvent",
    "CommentEventPublisher",
    "CommentNode",
    "CommentPageCache",
    "CommentService",
    "CommentThreadPage",
    "FileStorage",
    "HtmlSanitizer",
    "ImageProcessor",
    "Service",
    "ThreadAssembler",
    "UserService",
    "resolved_author",
    "sanitize",
]
