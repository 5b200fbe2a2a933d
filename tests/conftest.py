"""Test fixtures for the taskhub application."""

from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from taskhub.core.config import Settings
from taskhub.db.session import get_db
from taskhub.main import create_app
# Import models to ensure they're registered with SQLModel metadata
import taskhub.models  # noqa: F401


# Test database URL - using SQLite in-memory
TEST_SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings for an isolated test application."""
    return Settings(
        ENVIRONMENT="testing",
        DATABASE_URL=TEST_SQLALCHEMY_DATABASE_URL,
        BASE_URL="http://localhost:1337",
        SHORT_LINK_PATH="/s",
        DEBUG=False,
        LOG_TO_FILE=False,
        LOG_DIR=str(tmp_path / "logs"),
    )


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory SQLite database for each test."""
    engine = create_async_engine(
        TEST_SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session bound to the test engine."""
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
def override_get_db(test_db):
    """Override the get_db dependency for testing."""
    async def _override_get_db():
        yield test_db

    return _override_get_db


@pytest.fixture
def test_app(test_settings, override_get_db) -> FastAPI:
    """Create FastAPI test app with overridden dependencies."""
    app = create_app(test_settings)
    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest_asyncio.fixture
async def client(test_app) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Return an HTTP client talking to the test app in-process."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client
