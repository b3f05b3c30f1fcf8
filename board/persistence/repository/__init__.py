"""PostgreSQL repository implementations."""

from board.persistence.repository.comment import PostgresCommentRepository
from board.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresCommentRepository",
]
