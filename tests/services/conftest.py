"""Service test fixtures: async SQLite DB, registry service, FastAPI client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The registry service is placed on app.state directly (lifespan not run)

Design Decisions:
    - StaticPool: one shared connection so the in-memory schema survives
      across sessions
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from tokenregistry.config import Settings
from tokenregistry.db.base import Base
from tokenregistry.infrastructure.database import DatabaseSessionManager
from tokenregistry.main import app
from tokenregistry.services.registry_service import RegistryService
import tokenregistry.models  # noqa: F401

ADMIN_HEADERS = {"X-Caller-Identity": "admin"}


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        registry_administrator="admin",
        registry_name="Guild",
        registry_symbol="GLD",
        event_buffer_size=10,
    )


@pytest.fixture
async def service(settings, db_manager):
    return await RegistryService.restore(settings, db_manager)


@pytest.fixture
async def client(service):
    """FastAPI test client bound to the per-test registry service."""
    app.state.registry_service = service
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.state.registry_service = None


@pytest.fixture
def admin_headers():
    return dict(ADMIN_HEADERS)
