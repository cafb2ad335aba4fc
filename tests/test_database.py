"""Tests for engine lifecycle and the session dependency."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import inspect

from user_registry import database
from user_registry.config import Settings

SQLITE_SETTINGS = Settings(_env_file=None, DATABASE_URL="sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture
async def initialized_database() -> AsyncGenerator[None, None]:
    database.initialize_database(SQLITE_SETTINGS)
    yield
    await database.dispose_engine()


class TestDatabaseLifecycle:
    def test_engine_requires_initialization(self) -> None:
        with pytest.raises(RuntimeError):
            database.get_engine()

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("initialized_database")
    async def test_create_tables_registers_users_table(self) -> None:
        await database.create_tables()

        async with database.get_engine().connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        assert "users" in tables

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("initialized_database")
    async def test_get_db_yields_session_from_factory(self) -> None:
        factory = database.get_session_factory(SQLITE_SETTINGS)
        sessions = database.get_db(factory)

        session = await anext(sessions)
        assert session.bind is database.get_engine()

        await sessions.aclose()

    @pytest.mark.asyncio
    async def test_dispose_resets_engine(self) -> None:
        database.initialize_database(SQLITE_SETTINGS)

        await database.dispose_engine()

        with pytest.raises(RuntimeError):
            database.get_engine()
