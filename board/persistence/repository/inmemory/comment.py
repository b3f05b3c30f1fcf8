"""In-memory comment repository for testing."""

from typing import List, Optional

from board.domain.error import IntegrityError
from board.domain.model.comment import Comment
from board.domain.repository.comment import CommentRepository
from board.domain.repository.user import UserRepository
from board.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Authors are resolved through the user repository on every read, the
    way the SQL implementation joins them. Parent and author references
    are checked on create like the database foreign keys.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._user_repository = user_repository

    async def _with_author(self, comment: Comment) -> Comment:
        author = await self._user_repository.find_by_id(comment.user_id)
        return comment.model_copy(update={"author": author})

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._comments.get(comment_id)
        return await self._with_author(comment) if comment else None

    async def find_all(self) -> List[Comment]:
        """All comments, oldest first; ties keep insertion order."""
        ordered = sorted(self._comments.values(), key=lambda c: c.created_at)
        return [await self._with_author(comment) for comment in ordered]

    async def count_top_level(self) -> int:
        """Count comments without a parent."""
        return sum(1 for c in self._comments.values() if c.parent_id is None)

    async def create(self, comment: Comment) -> Comment:
        """Store a comment, enforcing parent and author references."""
        if comment.parent_id is not None and comment.parent_id not in self._comments:
            raise IntegrityError(
                "Comment", str(comment.id), f"parent {comment.parent_id} does not exist"
            )
        if await self._user_repository.find_by_id(comment.user_id) is None:
            raise IntegrityError(
                "Comment", str(comment.id), f"user {comment.user_id} does not exist"
            )
        self._comments[comment.id] = comment.model_copy(update={"author": None})
        return await self._with_author(comment)
