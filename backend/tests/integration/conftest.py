"""Shared fixtures: the FastAPI app on an in-memory SQLite database with fake auth."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from salonflow.application.interfaces import AuthAdapter
from salonflow.domain.entities import Principal
from salonflow.infrastructure.database import Base
from salonflow.infrastructure.database.session import get_db_session
from salonflow.infrastructure.dependencies import get_auth_adapter
from salonflow.main import app

TOKENS = {
    "token-u1": Principal(id="u1", email="u1@example.com"),
    "token-u2": Principal(id="u2", email="u2@example.com"),
}


class FakeAuthAdapter(AuthAdapter):
    async def validate_token(self, token: str) -> Principal | None:
        return TOKENS.get(token)


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_auth_adapter] = FakeAuthAdapter
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def u1() -> dict[str, str]:
    return {"Authorization": "Bearer token-u1"}


@pytest.fixture
def u2() -> dict[str, str]:
    return {"Authorization": "Bearer token-u2"}
