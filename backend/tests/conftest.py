"""Root conftest: shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the full schema
    - get_db dependency overridden to use the test DB session
    - Dependency overrides are cleared after each client fixture

Design Decisions:
    - SQLite in-memory: RETURNING and positional binds behave the same as on PostgreSQL
      for the statements the handlers issue
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

import streambase.models  # noqa: E402,F401
from streambase.db.base import Base  # noqa: E402
from streambase.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from streambase.infrastructure.executor import SqlExecutor  # noqa: E402
from streambase.main import app  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def executor(test_db):
    return SqlExecutor(test_db)


@pytest.fixture
def make_manager():
    """Build a DatabaseSessionManager around an existing engine (no pool arguments)."""
    def _make(engine):
        manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
        manager.engine = engine
        manager._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )
        return manager
    return _make


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
