"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions should inherit from DomainException
to enable centralized exception handling in the presentation layer.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_ROLE = "INVALID_ROLE"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    HEAD_IDENTITY_NOT_FOUND = "HEAD_IDENTITY_NOT_FOUND"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Conflict Errors (409)
    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    ROLL_NUMBER_ALREADY_EXISTS = "ROLL_NUMBER_ALREADY_EXISTS"
    HEAD_IDENTIFIER_ALREADY_EXISTS = "HEAD_IDENTIFIER_ALREADY_EXISTS"
    HEAD_IDENTITY_ALREADY_REGISTERED = "HEAD_IDENTITY_ALREADY_REGISTERED"
    DEPARTMENT_MISMATCH = "DEPARTMENT_MISMATCH"
    CANNOT_DELETE_SELF = "CANNOT_DELETE_SELF"

    # Forbidden Errors (403)
    FORBIDDEN = "FORBIDDEN"
    ROLE_NOT_ALLOWED = "ROLE_NOT_ALLOWED"
    NOT_RESOURCE_OWNER = "NOT_RESOURCE_OWNER"

    # Internal invariant violations (500)
    INTEGRITY_FAULT = "INTEGRITY_FAULT"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    This exception provides structured error information that can be
    used by the presentation layer to generate consistent API responses.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ForbiddenError(DomainException):
    """Raised when an authenticated caller is not allowed to do something."""

    def __init__(
        self,
        message: str = "Access denied",
        code: ErrorCode = ErrorCode.FORBIDDEN,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class IntegrityFault(DomainException):  # NOQA: N818
    """Raised when stored data violates an internal invariant.

    Not user-actionable. The presentation layer logs the details and answers
    with a generic internal error.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTEGRITY_FAULT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
