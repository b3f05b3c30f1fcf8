"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.comment import Comment
from board.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Every comment returned carries its resolved ``author``. Failures to
    reach the store surface as StoreUnavailableError, constraint
    violations as IntegrityError. There are no internal retries.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment with its author if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Comment]:
        """Load every comment with its author.

        Returns:
            All comments ordered by creation time, oldest first
        """
        pass

    @abstractmethod
    async def count_top_level(self) -> int:
        """Count comments that are not replies.

        Returns:
            Number of comments with no parent
        """
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Persist a new comment and commit.

        Args:
            comment: The comment to create

        Returns:
            The stored comment with its author resolved
        """
        pass
