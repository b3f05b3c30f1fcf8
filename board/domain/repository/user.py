"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.user import User
from board.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User entity.

    Implementations raise StoreUnavailableError when the backing store
    cannot be reached.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find the first user registered with an email.

        Emails are not unique, so this is a soft lookup: the comparison is
        exact and the first stored match wins.

        Args:
            email: Email address to look up

        Returns:
            The matching user if any, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and commit.

        Args:
            user: The user to create

        Returns:
            The stored user
        """
        pass
