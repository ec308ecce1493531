"""Shared utilities for SQLAlchemy repositories."""

from sqlalchemy.exc import SQLAlchemyError

from capstone.domain.shared.exceptions import RecordStoreError


def to_store_error(exc: SQLAlchemyError, operation: str) -> RecordStoreError:
    """Wrap a driver error, keeping the database's own message as diagnostic."""
    diagnostic = str(getattr(exc, "orig", None) or exc)
    return RecordStoreError(diagnostic, details={"operation": operation})
