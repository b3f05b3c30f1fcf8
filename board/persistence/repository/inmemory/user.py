"""In-memory user repository for testing."""

from typing import Optional

from board.domain.model.user import User
from board.domain.repository.user import UserRepository
from board.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find the first user stored with this exact email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def create(self, user: User) -> User:
        """Store a user."""
        self._users[user.id] = user
        return user
