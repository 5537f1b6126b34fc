"""Pytest configuration and fixtures"""

import os

# Set test environment variables BEFORE any imports
# This must happen at module load time, not in a fixture
os.environ["STORE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_JSON"] = "false"

from contextlib import asynccontextmanager
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from docket.api.deps import get_context
from docket.models import Base
from docket.passwords import PasswordHasher
from docket.schemas import UserCreate, UserRole
from docket.services import ServiceContext
from docket.services import users as user_service
from docket.store import InMemoryEntityStore, SqlEntityStore
from docket.utils.clock import FixedClock

STRONG_PASSWORD = "Secur3!Pass"
NOW = datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def store():
    return InMemoryEntityStore()


@pytest.fixture
def ctx(store, clock):
    """Service context over an in-memory store and a frozen clock."""
    return ServiceContext(store=store, clock=clock, passwords=PasswordHasher("legacy"))


@pytest.fixture
def make_user(ctx):
    """Create a user through the service layer."""
    async def _make_user(username: str, role: UserRole = UserRole.LITIGANT, email: str = None):
        return await user_service.create_user(
            ctx,
            UserCreate(
                username=username,
                email=email or f"{username}@court.example",
                password=STRONG_PASSWORD,
                role=role.value,
            ),
        )
    return _make_user


@pytest.fixture
def client(ctx):
    """HTTP client bound to the test context (startup hooks are skipped)."""
    from docket.main import app

    app.dependency_overrides[get_context] = lambda: ctx
    yield TestClient(app)
    app.dependency_overrides.clear()


@asynccontextmanager
async def sqlite_store():
    """SqlEntityStore over a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        yield SqlEntityStore(session_factory)
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest.fixture
async def sql_store():
    async with sqlite_store() as store:
        yield store


class FakeRedis:
    """Dict-backed stand-in for the hash commands the Redis store uses."""

    def __init__(self):
        self.hashes = {}

    async def hget(self, key, field):
        return self.hashes.get(key, {}).get(field)

    async def hset(self, key, field, value):
        self.hashes.setdefault(key, {})[field] = value
        return 1

    async def hdel(self, key, field):
        return 1 if self.hashes.get(key, {}).pop(field, None) is not None else 0

    async def hvals(self, key):
        return list(self.hashes.get(key, {}).values())


@pytest.fixture
def fake_redis():
    return FakeRedis()
