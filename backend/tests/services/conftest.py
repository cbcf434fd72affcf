"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - app.state carries a LedgerStore on the frozen test clock and a local-only catalog

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so tables created
      by the fixture are visible to every session
    - ASGITransport does not run the lifespan, so the fixture sets app.state itself
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from vyral.db.base import Base
from vyral.infrastructure.database import get_db, DatabaseSessionManager
import vyral.infrastructure.database as db_module
import vyral.models  # noqa: F401
from vyral.main import app
from vyral.services.ledger_store import LedgerStore
from vyral.services.module_catalog import ModuleCatalogService


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
def ledger_store(ctx) -> LedgerStore:
    return LedgerStore(ctx=ctx)


@pytest.fixture
async def client(test_engine, test_session_factory, ledger_store):
    """FastAPI test client with DB dependency and app.state overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    app.state.ledger_store = ledger_store
    app.state.module_catalog = ModuleCatalogService()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
