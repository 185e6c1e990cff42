"""Centralized exception handlers for the FastAPI application.

Domain and authentication exceptions are mapped to HTTP responses with a
consistent error format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from rollcall.presentation.api.exception_handlers import (
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from rollcall.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    IntegrityFault,
    ValidationError,
)
from rollcall_auth import AuthError

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ROLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.HEAD_IDENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - already exists or wrong state
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.ROLL_NUMBER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.HEAD_IDENTIFIER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.HEAD_IDENTITY_ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    ErrorCode.DEPARTMENT_MISMATCH: status.HTTP_409_CONFLICT,
    ErrorCode.CANNOT_DELETE_SELF: status.HTTP_409_CONFLICT,
    # 403 Forbidden
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.ROLE_NOT_ALLOWED: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_RESOURCE_OWNER: status.HTTP_403_FORBIDDEN,
    # 500 Internal Server Error
    ErrorCode.INTEGRITY_FAULT: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:  # NOQA: PLR0911
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ForbiddenError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, IntegrityFault):
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
        headers=headers,
    )


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(IntegrityFault)
    async def integrity_fault_handler(
        request: Request,
        exc: IntegrityFault,
    ) -> JSONResponse:
        """Stored data broke an invariant. Logged in full, never exposed."""
        logger.error(
            "Integrity fault on %s %s: %s (details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.details,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Logs the full exception details for debugging while returning
        a safe, user-friendly message to the client.
        """
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

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Every authentication failure is a 401 with a bearer challenge."""
        logger.warning(
            "Authentication failed on %s %s (code=%s)",
            request.method,
            request.url.path,
            exc.code,
        )
        return _create_error_response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=exc.message,
            code=exc.code,
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed request bodies are user errors, reported as 400."""
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=_first_validation_message(exc),
            code=ErrorCode.VALIDATION_ERROR.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
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
