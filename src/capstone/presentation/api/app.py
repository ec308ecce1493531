"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from capstone.infrastructure.persistence.sqlalchemy.init_db import create_tables
from capstone.presentation.api.dependencies import get_engine
from capstone.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from capstone.presentation.api.routers import (
    auth_router,
    onboarding_router,
    profile_router,
    projects_router,
)
from capstone.presentation.api.schemas import HealthResponse
from capstone_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level for
    capstone modules and WARNING for noisy third-party libraries.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("capstone", "capstone_auth", "capstone_config"):
        logging.getLogger(name).setLevel(log_level)

    for name in ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite"):
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Sign-in landing and sign-out.

Tokens are issued by the hosted identity provider; this API only verifies
them. After sign-in the client asks `/auth/landing` where to go:
- `/onboarding` when no profile or role exists yet
- `/student`, `/adviser` or `/coordinator` otherwise
""",
    },
    {
        "name": "Onboarding",
        "description": """Profile completion for new principals.

Saves the display name, email and avatar, then assigns the system role:
- `student` → role `student`, redirect `/student`
- `teacher` → role `adviser`, redirect `/adviser`
""",
    },
    {
        "name": "Profile",
        "description": "Read and edit the caller's own profile.",
    },
    {
        "name": "Projects",
        "description": """Research projects and their memberships.

**Creation:** the creator becomes the project's leader. An attached
document (PDF, DOC, DOCX, max 10MB) is stored best effort.

**Joining:** any principal with the project code can join. A pending
invitation is accepted in place.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Capstone API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    if not get_settings().backend_configured:
        logger.warning(
            "BACKEND_URL / BACKEND_API_KEY not set: uploads will fail "
            "and sign-out only ends the local session",
        )
    yield

    logger.info("Shutting down Capstone API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(
        onboarding_router,
        prefix="/onboarding",
        tags=["Onboarding"],
    )
    v1_router.include_router(profile_router, prefix="/profile", tags=["Profile"])
    v1_router.include_router(projects_router, prefix="/projects", tags=["Projects"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description=(
            "Onboarding, profiles and **research project** management "
            "for capstone students and advisers."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint, unversioned for load balancers."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_V1_PREFIX}/auth",
                "onboarding": f"{API_V1_PREFIX}/onboarding",
                "profile": f"{API_V1_PREFIX}/profile",
                "projects": f"{API_V1_PREFIX}/projects",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
