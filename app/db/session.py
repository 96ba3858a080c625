"""
Database session and engine configuration.

This file sets up the async database connection using SQLAlchemy + asyncpg.
The engine is optional: without DATABASE_URL the application runs against
the bundled fallback dataset only.
"""

import logging
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Optional[AsyncEngine]:
    """
    Create the async database engine, or None when no database is configured.

    Pool sizing comes from settings. Prepared statements are disabled
    on asyncpg because search statements are composed dynamically.
    """
    if not settings.DATABASE_URL:
        logger.warning("DATABASE_URL is not set; searches will use the fallback dataset")
        return None

    connect_args = {}
    if settings.DATABASE_URL.startswith("postgresql+asyncpg"):
        connect_args["statement_cache_size"] = 0

    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DEBUG,  # When DEBUG=True, prints SQL queries to console
        pool_size=settings.DB_POOL_MAX,
        pool_recycle=settings.DB_POOL_MAX_LIFETIME_SECONDS,
        pool_timeout=settings.DB_POOL_TIMEOUT_SECONDS,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Keeps data accessible after commit
    )


@asynccontextmanager
async def session_scope(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Context manager helper for async DB sessions (used by sources and scripts)."""
    async with session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
