"""Shared test fixtures.

Every test gets a fresh in-memory SQLite database. API tests drive the
FastAPI app through ``httpx.AsyncClient`` with ``get_db`` pointed at it.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["APP_DEBUG"] = "false"
os.environ["ADMIN_PASSWORD"] = ""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fullsco.config import settings
from fullsco.db.models import Base, UserRole
from fullsco.db.session import get_db
from fullsco.main import app
from fullsco.services.users import UsersService

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-secret"


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "upload_dir", str(path))
    return path


@pytest.fixture
async def client(session_factory, upload_dir):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def admin_user(db):
    return await UsersService(db).create(
        {
            "username": ADMIN_USERNAME,
            "password": ADMIN_PASSWORD,
            "email": "admin@fullsco.com",
            "full_name": "Site Admin",
            "role": UserRole.ADMIN,
        }
    )


@pytest.fixture
async def admin_client(client, admin_user):
    """``client`` with an admin session cookie."""
    response = await client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return client
