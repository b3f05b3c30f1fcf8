"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from board.domain.model import Comment, User
from board.domain.value import CommentId, Email, UserId, UserName

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_user(user_name: str = "alice", email: str | None = None) -> User:
    """Build a user with a unique email unless one is given."""
    return User(
        id=UserId(uuid4()),
        user_name=UserName(user_name),
        email=Email(email or f"{user_name.lower()}-{uuid4().hex[:8]}@example.com"),
        created_at=BASE_TIME,
    )


def make_comment(
    author: User,
    minute: int = 0,
    parent: Comment | None = None,
    text: str = "Hello",
) -> Comment:
    """Build a comment with its author resolved, ``minute`` after BASE_TIME.

    Args:
        author: Comment author, attached as if the store joined it
        minute: Offset used for created_at, so ordering is explicit
        parent: Parent comment for replies
        text: Comment body
    """
    return Comment(
        id=CommentId(uuid4()),
        user_id=author.id,
        text=text,
        parent_id=parent.id if parent else None,
        created_at=BASE_TIME + timedelta(minutes=minute),
        author=author,
    )
