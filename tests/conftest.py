"""Shared fixtures: a throwaway SQLite database per test and an HTTP client bound to it."""

import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="blog-api-logs-"))
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from blog_api import models  # noqa: F401
from blog_api.core.db.database import Base, async_get_db
from blog_api.main import app
from blog_api.models import ROLE_ADMIN
from blog_api.services import IdentityDirectory, PostService


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
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


@pytest.fixture
def identity(db):
    return IdentityDirectory(db)


@pytest.fixture
def post_service(db):
    return PostService(db)


@pytest_asyncio.fixture
async def admin(identity):
    """First registered user, therefore an admin."""
    return await identity.register("Ada Admin", "ada@example.com", "correct horse")


@pytest_asyncio.fixture
async def second_admin(identity, admin, db):
    user = await identity.register("Grace Admin", "grace@example.com", "battery staple")
    user.role = ROLE_ADMIN
    await db.commit()
    return user


@pytest_asyncio.fixture
async def reader(identity, admin):
    return await identity.register("Rita Reader", "rita@example.com", "open sesame")


@pytest_asyncio.fixture
async def post(post_service, admin):
    return await post_service.create(
        actor_id=admin.id,
        title="Hello, World! 2024",
        content="<p>First post</p>",
        excerpt="A short excerpt",
        tags=["intro", "news"],
        published=True,
    )


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[async_get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
