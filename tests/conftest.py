"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any
from uuid import uuid4

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import AccountModel, Base


# Compile JSONB as JSON for SQLite (used in tests)
@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_: Any, compiler: Any, **kw: Any) -> str:
    return "JSON"


# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Fixed test user ID for consistency
TEST_USER_ID = uuid4()


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(
    engine: AsyncEngine,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Create session factory."""
    factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    yield factory


@pytest.fixture
def test_user() -> TokenUser:
    """Create a test user with fixed ID."""
    return TokenUser(
        id=TEST_USER_ID,
        email="test@example.com",
        name="Test User",
    )


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def auth_token(auth_provider: JWTAuthProvider, test_user: TokenUser) -> str:
    """Create auth token for test user."""
    return str(auth_provider.create_token(test_user))


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def github_payload() -> list[dict[str, Any]]:
    """Raw repository listing as returned by the GitHub API."""
    return [
        {
            "id": 1,
            "name": "first-repo",
            "full_name": "octocat/first-repo",
            "html_url": "https://github.com/octocat/first-repo",
            "description": "The first one",
            "language": "Python",
            "stargazers_count": 3,
            "watchers_count": 3,
            "forks_count": 1,
            "created_at": "2015-01-01T00:00:00Z",
        },
        {
            "id": 2,
            "name": "second-repo",
            "full_name": "octocat/second-repo",
            "html_url": "https://github.com/octocat/second-repo",
            "description": None,
            "language": None,
            "stargazers_count": 0,
            "watchers_count": 0,
            "forks_count": 0,
            "created_at": "2016-01-01T00:00:00Z",
        },
    ]


@pytest.fixture
async def authenticated_client(
    session_factory: async_sessionmaker[AsyncSession],
    test_user: TokenUser,
    auth_provider: JWTAuthProvider,
    github_payload: list[dict[str, Any]],
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create authenticated test client with proper database and auth overrides.

    This client:
    - Uses an in-memory SQLite database
    - Injects a test user account into the database
    - Overrides auth dependency to return the test user
    - Overrides UoW factory to use test session
    - Serves GitHub lookups from a mock transport ("octocat" exists, nobody else)
    """
    import httpx

    from api.dependencies.auth import get_auth_provider, get_current_user
    from api.v1.dependencies import (
        get_account_deletion_service,
        get_github_service,
        get_profile_service,
    )
    from domain.services.account_deletion_service import AccountDeletionService
    from domain.services.github_service import GitHubService
    from domain.services.profile_service import ProfileService
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from infrastructure.github.github_client import GitHubClient
    from main import create_app

    app = create_app()

    # Create an account for the test user
    async with session_factory() as session:
        session.add(
            AccountModel(
                id=test_user.id,
                email=test_user.email,
                name=test_user.name,
                avatar_url="https://example.com/avatar.png",
            )
        )
        await session.commit()

    # Override auth to return test user directly
    async def override_get_user() -> TokenUser:
        return test_user

    def override_get_auth_provider() -> JWTAuthProvider:
        return auth_provider

    # Create a UoW factory that uses test session
    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    def github_handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/users/octocat/repos":
            return httpx.Response(200, json=github_payload)
        return httpx.Response(404, json={"message": "Not Found"})

    github_client = GitHubClient(
        base_url="https://api.github.test",
        transport=httpx.MockTransport(github_handler),
    )

    def override_get_profile_service() -> ProfileService:
        return ProfileService(test_uow_factory)

    def override_get_account_deletion_service() -> AccountDeletionService:
        return AccountDeletionService(test_uow_factory)

    def override_get_github_service() -> GitHubService:
        return GitHubService(github_client)

    app.dependency_overrides[get_current_user] = override_get_user
    app.dependency_overrides[get_auth_provider] = override_get_auth_provider
    app.dependency_overrides[get_profile_service] = override_get_profile_service
    app.dependency_overrides[get_account_deletion_service] = (
        override_get_account_deletion_service
    )
    app.dependency_overrides[get_github_service] = override_get_github_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
