"""User domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from board.domain.model import User
from board.domain.repository import UserRepository
from board.domain.value import Email, HomePage, UserId, UserName

from .base import Service


class UserService(Service):
    """Domain service for comment authors."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def resolve_or_create(
        self,
        user_name: UserName,
        email: Email,
        home_page: HomePage | None,
        ip_address: str,
        user_agent: str,
    ) -> User:
        """Find the author by email, creating them on first submission.

        An existing user is returned as stored; name and home page from
        later submissions do not overwrite it.

        Args:
            user_name: Display name from the form
            email: Email from the form, the lookup key
            home_page: Optional home page URL
            ip_address: Origin address of the request
            user_agent: Client signature of the request

        Returns:
            The existing or newly created user
        """
        with logfire.span("user_service.resolve_or_create", email=email.root):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.info("Existing user resolved", user_id=str(existing.id))
                return existing

            user = User(
                id=UserId(uuid4()),
                user_name=user_name,
                email=email,
                home_page=home_page,
                ip_address=ip_address,
                user_agent=user_agent,
                created_at=datetime.now(timezone.utc),
            )
            created = await self.user_repository.create(user)
            logfire.info(
                "User created",
                user_id=str(created.id),
                user_name=created.user_name.root,
            )
            return created
