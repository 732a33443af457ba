"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from loop.config import Settings

# Session.info key that turns the end-of-request commit into a rollback
ROLLBACK_ONLY = "rollback_only"


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
        autoflush=False,  # Manual flushing for better control
    )


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Session for one unit of work.

    Commits when the block finishes cleanly. Rolls back when the block raises
    or when the session was marked with `ROLLBACK_ONLY`.
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            logfire.warn("Session rollback", error=str(e))
            await session.rollback()
            raise

        if session.info.get(ROLLBACK_ONLY):
            logfire.warn("Session rollback", reason="marked rollback-only")
            await session.rollback()
            return

        await session.commit()
        logfire.info("Session committed")
