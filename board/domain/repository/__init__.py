"""Repository interfaces for the comment board.

Interfaces live in the domain layer; implementations live in persistence.
"""

from board.domain.repository.comment import CommentRepository
from board.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "CommentRepository",
]
