"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic objects, so rows are mapped by hand.
Comment queries join the author and label its columns ``author_*``.
"""

from typing import Any, Dict
from uuid import UUID

from board.domain.model import Comment, User
from board.domain.value import CommentId, Email, HomePage, UserId, UserName

AUTHOR_PREFIX = "author_"


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any], prefix: str = "") -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict
        prefix: Column label prefix when the user is joined onto another row

    Returns:
        User domain model
    """
    home_page = row.get(f"{prefix}home_page")
    return User(
        id=UserId(_uuid(row[f"{prefix}id"])),
        user_name=UserName(row[f"{prefix}user_name"]),
        email=Email(row[f"{prefix}email"]),
        home_page=HomePage(home_page) if home_page else None,
        ip_address=row[f"{prefix}ip_address"],
        user_agent=row.get(f"{prefix}user_agent") or "",
        created_at=row[f"{prefix}created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "user_name": user.user_name.root,
        "email": user.email.root,
        "home_page": user.home_page.root if user.home_page else None,
        "ip_address": user.ip_address,
        "user_agent": user.user_agent,
        "created_at": user.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert a comment row, with optional joined author, to a Comment.

    A missing joined author leaves ``author`` as None; callers treat that
    as an integrity failure.
    """
    author = (
        row_to_user(row, prefix=AUTHOR_PREFIX)
        if row.get(f"{AUTHOR_PREFIX}id") is not None
        else None
    )
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        text=row["text"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        image_path=row.get("image_path"),
        text_file_path=row.get("text_file_path"),
        created_at=row["created_at"],
        author=author,
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict (author excluded)."""
    return {
        "id": comment.id,
        "user_id": comment.user_id,
        "parent_id": comment.parent_id,
        "text": comment.text,
        "image_path": comment.image_path,
        "text_file_path": comment.text_file_path,
        "created_at": comment.created_at,
    }
