import os
from typing import AsyncGenerator

# Point settings at an in-memory database before any lib reads them
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from libs.common.config import get_settings
from libs.db.base import Base
from services.transport_service import models as _transport_models  # noqa: F401

get_settings.cache_clear()


@pytest_asyncio.fixture
async def test_engine():
    """
    Fresh in-memory SQLite database per test. StaticPool keeps the single
    connection alive so every session sees the same tables.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient bound to the transport app with the DB dependency overridden.
    Authentication runs for real; use ``auth_headers_for`` to get a token.
    """
    from libs.db.session import get_async_db
    from services.transport_service.app.main import app

    app.dependency_overrides[get_async_db] = lambda: db_session

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers_for():
    """Return a callable building bearer headers for a persisted ``User``."""
    from libs.auth.models import AuthUser
    from libs.auth.tokens import create_access_token

    def _headers(user) -> dict:
        token = create_access_token(
            AuthUser(
                user_id=user.id,
                email=user.email,
                role=user.role.value,
                team_id=user.team_id,
            )
        )
        return {"Authorization": f"Bearer {token.access_token}"}

    return _headers
