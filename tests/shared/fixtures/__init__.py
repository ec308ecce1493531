"""Shared pytest fixtures for all test packages."""

from tests.shared.fixtures.blob_store import InMemoryBlobStore
from tests.shared.fixtures.database import (
    async_engine,
    database_url,
    db_session,
    session_maker,
)
from tests.shared.fixtures.factories import (
    TestFiles,
    TestPrincipalFactory,
    make_profile,
    make_project,
)

__all__ = [
    "InMemoryBlobStore",
    "TestFiles",
    "TestPrincipalFactory",
    "async_engine",
    "database_url",
    "db_session",
    "make_profile",
    "make_project",
    "session_maker",
]
