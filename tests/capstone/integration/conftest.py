"""Pytest fixtures for integration tests (SQLite database per test)."""

from tests.shared.fixtures.database import (
    async_engine,
    database_url,
    db_session,
    session_maker,
)

# Make fixtures available to tests in this directory
__all__ = ["async_engine", "database_url", "db_session", "session_maker"]
