"""Shared domain components.

This module exports shared exceptions and utilities used across
domain boundaries.
"""

from capstone.domain.shared.exceptions import (
    AuthorizationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    RecordStoreError,
    ValidationError,
)
from capstone.domain.shared.time import ensure_tz_aware, epoch_millis, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "AuthorizationError",
    "EntityNotFoundError",
    "ConflictError",
    "ExternalServiceError",
    "RecordStoreError",
    # Utilities
    "ensure_tz_aware",
    "epoch_millis",
    "utc_now",
]
