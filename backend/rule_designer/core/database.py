# backend/rule_designer/core/database.py
"""Database configuration and session management.

Supports PostgreSQL (asyncpg) and SQLite (aiosqlite), picked from the
scheme of DATABASE_URL.
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import NullPool
from rule_designer.core.config import settings
import logging

logger = logging.getLogger(__name__)


def _create_engine():
    """Create the engine matching DATABASE_URL."""
    db_url = settings.effective_database_url

    if db_url.startswith("postgresql://") or db_url.startswith("postgresql+asyncpg://"):
        if not db_url.startswith("postgresql+asyncpg://"):
            db_url = db_url.replace("postgresql://", "postgresql+asyncpg://")

        logger.info(f"Using PostgreSQL database: {db_url.split('@')[-1]}")
        return create_async_engine(
            db_url,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            echo=False,
        )

    elif db_url.startswith("sqlite://") or db_url.startswith("sqlite+aiosqlite://"):
        # Development/testing
        if db_url.startswith("sqlite://"):
            db_url = db_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        logger.info(f"Using SQLite database: {db_url}")
        return create_async_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=NullPool,
        )

    else:
        raise ValueError(f"Unsupported database URL scheme: {db_url}")


engine = _create_engine()
async_session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_db() -> AsyncSession:
    async with async_session() as session:
        yield session
