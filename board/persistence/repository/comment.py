"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId
from board.persistence.database import store_errors
from board.persistence.mappers import AUTHOR_PREFIX, comment_to_dict, row_to_comment
from board.persistence.tables import comments_table, users_table


def _select_with_author():
    """Comments left-joined to their author, author columns labeled."""
    author_columns = [
        column.label(f"{AUTHOR_PREFIX}{column.name}") for column in users_table.c
    ]
    return select(comments_table, *author_columns).select_from(
        comments_table.outerjoin(
            users_table, comments_table.c.user_id == users_table.c.id
        )
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = _select_with_author().where(comments_table.c.id == comment_id)
        with store_errors("find_comment_by_id"):
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_all(self) -> List[Comment]:
        """Load all comments, oldest first, ties broken by id."""
        stmt = _select_with_author().order_by(
            comments_table.c.created_at, comments_table.c.id
        )
        with store_errors("find_all_comments"):
            result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_top_level(self) -> int:
        """Count comments without a parent."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_id.is_(None))
        )
        with store_errors("count_top_level_comments"):
            result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, comment: Comment) -> Comment:
        """Insert a comment, commit, and read it back with its author."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        with store_errors("create_comment"):
            await self.session.execute(stmt)
            await self.session.commit()

        saved = await self.find_by_id(comment.id)
        return saved if saved is not None else comment
