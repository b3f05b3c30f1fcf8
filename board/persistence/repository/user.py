"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import Email, UserId
from board.persistence.database import store_errors
from board.persistence.mappers import row_to_user, user_to_dict
from board.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        with store_errors("find_user_by_id"):
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find the earliest user registered with an email."""
        stmt = (
            select(users_table)
            .where(users_table.c.email == email.root)
            .order_by(users_table.c.created_at, users_table.c.id)
            .limit(1)
        )
        with store_errors("find_user_by_email"):
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def create(self, user: User) -> User:
        """Insert a user and commit."""
        stmt = users_table.insert().values(**user_to_dict(user))
        with store_errors("create_user"):
            await self.session.execute(stmt)
            await self.session.commit()
        return user
