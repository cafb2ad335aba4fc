"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Generator
from datetime import date
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from user_registry import models  # noqa: F401
from user_registry.application.identity.services.user_service import UserService
from user_registry.database import Base
from user_registry.domain.common.value_objects.ids import UserId
from user_registry.domain.identity.entities.user import User
from user_registry.infrastructure.identity.dependencies import get_user_service
from user_registry.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def mock_user_repository() -> AsyncMock:
    """Repository double whose methods are all awaitable."""
    repository = AsyncMock()
    repository.get_all.return_value = []
    repository.get_by_id.return_value = None
    repository.name_exists.return_value = False
    repository.create.return_value = True
    repository.update.return_value = True
    repository.delete.return_value = True
    return repository


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double recording every event."""
    return MagicMock()


@pytest.fixture
def user_service(mock_user_repository: AsyncMock, mock_logger: MagicMock) -> UserService:
    return UserService(user_repository=mock_user_repository, logger=mock_logger)


@pytest.fixture
def existing_user() -> User:
    return User.create_with_id(
        id=UserId(1),
        name="Gaye Tekin",
        age=24,
        date_of_birth=date(2000, 1, 1),
    )


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def client(user_service: UserService) -> Generator[TestClient, Any, None]:
    """Create a test client whose routes use the mocked user service."""

    def override_get_user_service() -> UserService:
        return user_service

    app.dependency_overrides[get_user_service] = override_get_user_service

    # No context manager: startup would try to open the configured database
    yield TestClient(app)

    app.dependency_overrides.clear()
