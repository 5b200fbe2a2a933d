"""Database base configuration for SQLAlchemy with SQLModel.

This module provides base database configuration for async SQLAlchemy with SQLModel.
It includes:
- Engine configuration per environment
- Session factory ownership
- Schema creation
"""

from typing import AsyncGenerator, Dict
import logging
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from taskhub.core.config import EnvironmentType, Settings

logger = logging.getLogger(__name__)


def get_engine_config(settings: Settings) -> Dict:
    """Get the appropriate engine configuration based on the environment.

    Returns:
        Dict: Engine configuration parameters for the current environment.
    """
    if settings.ENVIRONMENT == EnvironmentType.TESTING:
        return {"echo": settings.DB_ECHO, "poolclass": NullPool}

    if settings.SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
        # SQLite drivers do not take queue pool sizing arguments
        return {"echo": settings.DB_ECHO}

    return {
        "echo": settings.DB_ECHO,
        "pool_size": settings.POSTGRES_POOL_SIZE,
        "max_overflow": settings.POSTGRES_POOL_MAX_OVERFLOW,
        "pool_timeout": settings.POSTGRES_POOL_TIMEOUT,
        "pool_recycle": settings.POSTGRES_POOL_RECYCLE,
        "pool_pre_ping": True,
    }


def get_engine(settings: Settings) -> AsyncEngine:
    """Create and configure an async SQLAlchemy engine.

    Returns:
        AsyncEngine: Configured SQLAlchemy async engine instance.
    """
    engine_url = settings.SQLALCHEMY_DATABASE_URI
    logger.info(f"Creating database engine for {settings.ENVIRONMENT.value} environment")
    return create_async_engine(engine_url, **get_engine_config(settings))


class Database:
    """Owns the engine and session factory for one application instance."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine = get_engine(settings)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get async session with proper error handling and cleanup.

        Yields:
            AsyncSession: SQLAlchemy async session
        """
        session = self.session_factory()
        try:
            yield session
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create all tables registered on the SQLModel metadata."""
        # Table models must be imported so they register on the metadata
        import taskhub.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables created")

    async def dispose(self) -> None:
        await self.engine.dispose()

