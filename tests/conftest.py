"""Pytest configuration and fixtures for shop-admin.

Uses shop_admin.main:app for HTTP tests and
shop_admin.infrastructure.persistence.database for DB-dependent fixtures.
"""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from shop_admin.core.limiter import limiter
from shop_admin.infrastructure.persistence import database
from shop_admin.main import app


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI). Clears dependency overrides after."""
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL with migrations applied (alembic upgrade head).
    Skips when Postgres is not configured; run without DB via
    pytest -m 'not requires_db'.
    """
    database.get_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
