"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .dto import CommentDto, CommentPageResponse, CommentRecord, FlatCommentPage
from .get_comments import GetCommentsRequest, GetCommentsUseCase
from .preview_comment import (
    PreviewCommentRequest,
    PreviewCommentResponse,
    PreviewCommentUseCase,
)

__all__ = [
    "CommentDto",
    "CommentPageResponse",
    "CommentRecord",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "GetCommentsRequest",
    "FlatCommentPage",
    "GetCommentsUseCase",
    "PreviewCommentRequest",
    "PreviewCommentResponse",
    "PreviewCommentUseCase",
]
