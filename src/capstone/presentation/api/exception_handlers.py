"""Centralized exception handlers for the FastAPI application.

Domain exceptions escaping a router, and failed command results, are mapped
to HTTP responses through one error-code table.

Error Response Format (exceptions):
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Error Response Format (failed command results):
    {
        "success": false,
        "error": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from capstone.application.dtos import OperationFailure
from capstone.domain.shared.exceptions import (
    AuthorizationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_REQUIRED_FIELDS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ROLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FILE_TYPE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.FILE_TOO_LARGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAPER_STANDARD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_URL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ROLE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ALREADY_MEMBER: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PROJECT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    # 500 - store, blob store and identity provider failures
    ErrorCode.STORE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.AVATAR_UPLOAD_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.PROFILE_SAVE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.ROLE_ASSIGNMENT_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.PROJECT_SAVE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.IDENTITY_PROVIDER_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:  # NOQA: PLR0911
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, AuthorizationError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST

    return status.HTTP_400_BAD_REQUEST


def failure_response(failure: OperationFailure) -> JSONResponse:
    """Render a failed command result with the status of its error code."""
    status_code = ERROR_CODE_TO_STATUS.get(
        failure.code,
        status.HTTP_400_BAD_REQUEST,
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": failure.message,
            "code": failure.code.value,
        },
    )


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response."""
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for exceptions not handled above."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
