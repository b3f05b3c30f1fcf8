"""Database connection, session management and error translation."""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from board.config import Settings
from board.domain.error import IntegrityError, StoreUnavailableError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translate driver failures into domain errors.

    Connection and timeout failures become StoreUnavailableError,
    constraint violations become IntegrityError. Anything else propagates.

    Args:
        operation: Name of the repository operation, for error messages
    """
    try:
        yield
    except sa_exc.IntegrityError as e:
        raise IntegrityError("store", operation, str(e.orig)) from e
    except (
        sa_exc.OperationalError,
        sa_exc.InterfaceError,
        sa_exc.TimeoutError,
        OSError,
    ) as e:
        raise StoreUnavailableError(f"{operation}: {e}") from e
    except sa_exc.DBAPIError as e:
        if e.connection_invalidated:
            raise StoreUnavailableError(f"{operation}: {e}") from e
        raise
