"""Pytest fixtures for API integration tests.

The app runs against a SQLite file database and an in-memory blob store.
Bearer tokens are signed with the same secret the app verifies with.
"""

from typing import Optional

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from capstone.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from capstone.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from capstone.presentation.api.app import API_V1_PREFIX, create_app
from capstone.presentation.api.config import get_api_settings
from capstone.presentation.api.dependencies import get_blob_store, get_db_session
from capstone_auth import JWTService
from capstone_config.settings import Settings
from tests.shared.fixtures.blob_store import InMemoryBlobStore
from tests.shared.fixtures.database import make_engine, run_sync, sqlite_url

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"
TEST_AUDIENCE = "authenticated"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled and no hosted backend."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        jwt_audience=TEST_AUDIENCE,
        database_url_override=sqlite_url(tmp_path),
        backend_url="",
        backend_api_key=None,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def test_db_engine(api_settings):
    """Engine on the per-test SQLite file, with all tables created."""
    engine = make_engine(api_settings.database_url)
    run_sync(create_tables(engine))
    yield engine
    run_sync(drop_tables(engine))
    run_sync(engine.dispose())


@pytest.fixture
def test_session_maker(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def test_client(api_settings, test_session_maker, blob_store) -> TestClient:
    """Create a test client wired to the test database and blob store."""
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    app.dependency_overrides[get_blob_store] = lambda: blob_store

    return TestClient(app)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(TEST_JWT_SECRET, audience=TEST_AUDIENCE)


@pytest.fixture
def make_auth_headers(jwt_service):
    """Build Authorization headers for any principal."""

    def _make(
        user_id: str,
        email: str = "someone@example.com",
        avatar_url: Optional[str] = None,
    ) -> dict:
        metadata = {"avatar_url": avatar_url} if avatar_url else {}
        token = jwt_service.create_access_token(user_id, email, metadata)
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def auth_headers(make_auth_headers) -> dict:
    """Headers for the default principal u1 / a@b.com."""
    return make_auth_headers("u1", "a@b.com")


@pytest.fixture
def db_call(test_session_maker):
    """Run a repository call against the test database and return its result.

    Usage:
        project = db_call(lambda f: f.project_repository().find_by_code(code))
    """

    def _call(fn):
        async def _run():
            async with test_session_maker() as session:
                result = await fn(SQLAlchemyRepositoryFactory(session))
                await session.commit()
                return result

        return run_sync(_run())

    return _call


@pytest.fixture
def onboard(test_client, api_v1_prefix, make_auth_headers):
    """Complete onboarding for a principal through the API."""

    def _onboard(user_id: str, role: str = "student", email: str = "x@example.com"):
        response = test_client.post(
            f"{api_v1_prefix}/onboarding/complete-profile",
            headers=make_auth_headers(user_id, email),
            data={
                "userId": user_id,
                "email": email,
                "displayName": f"User {user_id}",
                "role": role,
            },
        )
        assert response.status_code == 200, response.text
        return response

    return _onboard
