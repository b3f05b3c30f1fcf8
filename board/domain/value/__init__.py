"""Domain value objects for the comment board."""

from board.domain.value.identifiers import CommentId, UserId
from board.domain.value.types import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    Email,
    HomePage,
    PageRequest,
    SortField,
    UserName,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    # Types
    "UserName",
    "Email",
    "HomePage",
    "SortField",
    "PageRequest",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
]
