"""Database schema initialization."""

import asyncio
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with Base.metadata
import capstone.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from capstone.infrastructure.persistence.sqlalchemy.engine import (
    create_database_engine,
)
from capstone.infrastructure.persistence.sqlalchemy.models.base import Base
from capstone_config.settings import get_settings

logger = logging.getLogger(__name__)


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    owns_engine = engine is None
    if engine is None:
        engine = create_database_engine(get_settings().database_url)

    logger.info("Ensuring all database tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if owns_engine:
        await engine.dispose()
    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all database tables (tests and local resets only)."""
    logger.warning("Dropping all database tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


def db_init() -> None:
    """Console entry point: create missing tables."""
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    url = settings.database_url
    logger.info("Database: %s", url.split("@")[-1] if "@" in url else url)
    asyncio.run(create_tables())
