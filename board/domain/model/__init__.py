"""Domain model entities for the comment board."""

from board.domain.model.comment import Comment
from board.domain.model.user import User

__all__ = [
    "User",
    "Comment",
]
