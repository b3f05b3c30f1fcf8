"""Mock persistence providers for testing."""

from dishka import Scope, provide

from board.domain.repository import CommentRepository, UserRepository
from board.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryUserRepository,
)
from board.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope keeps data across HTTP requests within one test client;
    each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self, user_repository: UserRepository) -> CommentRepository:
        """Provide in-memory comment repository that resolves authors."""
        return InMemoryCommentRepository(user_repository)
