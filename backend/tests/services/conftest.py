"""Service test fixtures — async DB + FastAPI test client + issued sessions.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - db_manager patched: SessionAuthMiddleware resolves sessions through it
    - admin_headers / user_headers carry real sessions issued by SqlSessionStore

Design Decisions:
    - SQLite in-memory with StaticPool: every session sees the same database
      (PostgreSQL-specific features not exercised here)
    - Session id sent via header by default; cookie transport has its own test
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.session_store import SqlSessionStore
import app.infrastructure.database as db_module
import app.models  # noqa: F401
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Middleware opens its lookup session from db_manager directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


async def _issue(test_db, user_id, role) -> dict:
    store = SqlSessionStore(test_db, get_settings().session_ttl_minutes)
    token = await store.open_session(user_id, role)
    return {get_settings().session_header_name: token}


@pytest.fixture
async def admin_headers(test_db):
    return await _issue(test_db, 1, "ADMIN")


@pytest.fixture
async def user_headers(test_db):
    return await _issue(test_db, 2, "USER")
