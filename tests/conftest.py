"""Shared fixtures: in-memory SQLite database and an HTTP client over the app."""

import os

# Настройки читаются при импорте concursos.core.config
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["DB_SCHEMA"] = ""
os.environ["LOG_FILE"] = ""
os.environ["EXPIRED_REFRESH_FUNCTION"] = ""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from concursos.db.database import get_db
from concursos.main import app
from concursos.models.base import Base
from concursos.models import adjudication_factors, alterations, announcements, archive, cpvs, notes  # noqa: F401


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def seed(session_factory):
    """Adds ORM objects in a short-lived session and commits them."""
    async def _seed(*objects):
        async with session_factory() as session:
            session.add_all(objects)
            await session.commit()
        return objects
    return _seed
