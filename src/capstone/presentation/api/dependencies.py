"""FastAPI dependency injection for the Capstone API.

Provides dependencies for:
- Database sessions
- Authentication (current principal from the bearer token)
- Repository factory and blob store, created per request
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from capstone.application.ports import BlobStore, IdentityGateway, Principal
from capstone.domain.shared.exceptions import AuthorizationError
from capstone.infrastructure.identity import SupabaseIdentityGateway
from capstone.infrastructure.persistence.sqlalchemy.engine import (
    create_database_engine,
)
from capstone.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from capstone.infrastructure.storage import SupabaseStorageBlobStore
from capstone.presentation.api.config import get_api_settings
from capstone_auth import JWTService
from capstone_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.
    """
    return create_database_engine(
        get_settings().database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with the identity provider's secret."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        audience=settings.jwt_audience,
    )


def get_identity_gateway(
    settings: Settings = Depends(get_api_settings),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> IdentityGateway:
    api_key = settings.backend_api_key
    return SupabaseIdentityGateway(
        jwt_service=jwt_service,
        base_url=settings.backend_url,
        api_key=api_key.get_secret_value() if api_key else "",
        timeout=settings.backend_timeout,
    )


Identity = Annotated[IdentityGateway, Depends(get_identity_gateway)]


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Optional[str]:
    """Raw bearer token from the Authorization header, if any."""
    if credentials is None:
        return None
    return credentials.credentials


BearerToken = Annotated[Optional[str], Depends(get_bearer_token)]


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_principal(
    token: BearerToken,
    gateway: Identity,
) -> Principal:
    """
    Resolve the bearer token to the authenticated principal.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid or expired
    """
    if not token:
        raise _unauthorized()
    try:
        return await gateway.authenticate(token)
    except AuthorizationError as e:
        raise _unauthorized() from e


# Type alias for injected principal
CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


async def get_optional_principal(
    token: BearerToken,
    gateway: Identity,
) -> Principal | None:
    """
    Optional authentication dependency.

    Returns the principal if a valid token is provided, None otherwise, so
    the endpoint can validate its input before rejecting the caller.
    """
    if not token:
        return None
    try:
        return await gateway.authenticate(token)
    except AuthorizationError:
        return None


OptionalPrincipal = Annotated[Principal | None, Depends(get_optional_principal)]


# -----------------------------------------------------------------------------
# Repository Factory & Blob Store
# -----------------------------------------------------------------------------


async def get_repository_factory(
    session: AsyncSession = Depends(get_db_session),
) -> SQLAlchemyRepositoryFactory:
    """Get the repository factory for this request's session."""
    return SQLAlchemyRepositoryFactory(session=session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


async def get_blob_store(
    token: BearerToken,
    settings: Settings = Depends(get_api_settings),
) -> AsyncGenerator[BlobStore, None]:
    """Blob store acting on behalf of the caller; closed after the request."""
    api_key = settings.backend_api_key
    store = SupabaseStorageBlobStore(
        base_url=settings.backend_url,
        api_key=api_key.get_secret_value() if api_key else "",
        access_token=token,
        timeout=settings.backend_timeout,
    )
    try:
        yield store
    finally:
        await store.close()


Storage = Annotated[BlobStore, Depends(get_blob_store)]

AppSettings = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Application Commands & Queries
# -----------------------------------------------------------------------------
# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   async def join_project(factory: RepoFactory, ...):
#       command = JoinProjectCommand.from_factory(factory)  # NOQA: ERA001
