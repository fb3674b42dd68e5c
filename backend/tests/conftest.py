import os

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from main import app
from shared.dependencies import build_workspace, get_db
from shared.infrastructure.database import Base

import activity.infrastructure.models  # noqa: F401
import auth.infrastructure.models  # noqa: F401
import documents.infrastructure.models  # noqa: F401
import projects.infrastructure.models  # noqa: F401

from auth.application.services import register_user
from auth.infrastructure.user_repository import DbUserRepository

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")


def _create_engine():
    if TEST_DATABASE_URL.startswith("sqlite"):
        # One shared in-memory database across sessions.
        return create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(TEST_DATABASE_URL)


@pytest.fixture
async def test_engine():
    engine = _create_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


async def create_user_and_get_headers(client: AsyncClient, suffix: str = "") -> dict:
    """Register a user and return auth headers."""
    await client.post(
        "/api/auth/register",
        json={
            "email": f"test{suffix}@example.com",
            "full_name": f"Test User{suffix}",
            "password": "secret123",
        },
    )
    resp = await client.post(
        "/api/auth/login",
        json={"email": f"test{suffix}@example.com", "password": "secret123"},
    )
    token = resp.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


def fail_statements(monkeypatch, target) -> None:
    """Make every statement executed through `target` fail like a dropped connection."""

    async def execute(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("server closed the connection"))

    monkeypatch.setattr(target, "execute", execute)


@pytest.fixture
async def auth_headers(client) -> dict:
    return await create_user_and_get_headers(client)


@pytest.fixture
async def db(test_engine):
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def workspace(db):
    return build_workspace(db)


@pytest.fixture
async def user(db):
    return await register_user(
        DbUserRepository(db),
        email="alice@example.com",
        password="secret123",
        full_name="Alice Smith",
    )


@pytest.fixture
async def other_user(db):
    return await register_user(
        DbUserRepository(db),
        email="bob@example.com",
        password="secret123",
        full_name="Bob Jones",
    )


@pytest.fixture(autouse=True)
async def override_db(test_engine):
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async def _override():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
