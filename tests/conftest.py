"""
Pytest configuration and fixtures for UserAuth API tests.
"""

import os

# Settings dibaca saat import, jadi environment harus di-set sebelum import app
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-userauth-api-tests-only")
os.environ.setdefault("PASSWORD_HASH_MEMORY_COST", "8192")

from typing import AsyncGenerator, Dict
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.core.config import settings
from app.core.security import token_issuer
from app.models.user import User
from app.schemas.token import IdentityClaim
from app.services.user import UserService
from app.api.dependencies.database import get_db


TEST_PASSWORD = "123456"


@pytest_asyncio.fixture
async def engine():
    """Create in-memory test database engine."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def override_dependencies(session_factory):
    """Override FastAPI dependencies for testing."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    yield

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(override_dependencies) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user."""
    user_service = UserService(db_session)
    return await user_service.create_user(
        name="John Doe",
        email="john@example.com",
        password=TEST_PASSWORD
    )


@pytest.fixture
def auth_headers(test_user: User) -> Dict[str, str]:
    """Create authentication headers with valid token."""
    token = token_issuer.issue(test_user.identity_claim(), settings.SECRET_KEY)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def identity_claim() -> IdentityClaim:
    """Identity claim yang tidak terikat ke database."""
    return IdentityClaim(id=str(uuid4()), email="jane@example.com")


@pytest.fixture
def api_url():
    """Build URL di bawah prefix API v1."""
    def _url(path: str) -> str:
        return f"{settings.API_V1_STR}{path}"
    return _url
