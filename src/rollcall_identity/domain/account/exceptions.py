"""Account domain exceptions.

Each exception maps onto one of the shared domain error kinds so the API
can answer with a stable code and status.
"""

from rollcall.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from rollcall_auth.exceptions import AuthError


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class EmailAlreadyExistsError(ConflictError):
    """Email already used by an account of any role."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "This email is already registered. Please use a different email",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class RollNumberAlreadyExistsError(ConflictError):
    """Roll number already used by another student."""

    def __init__(self, roll_number: str) -> None:
        self.roll_number = roll_number
        super().__init__(
            "This roll number is already taken. Please use a different one",
            code=ErrorCode.ROLL_NUMBER_ALREADY_EXISTS,
            details={"roll_number": roll_number},
        )


class HeadIdentifierAlreadyExistsError(ConflictError):
    """Head identifier already assigned to another account."""

    def __init__(self, head_identifier: str) -> None:
        self.head_identifier = head_identifier
        super().__init__(
            f"Head identifier already in use: {head_identifier}",
            code=ErrorCode.HEAD_IDENTIFIER_ALREADY_EXISTS,
            details={"head_identifier": head_identifier},
        )


class AccountNotFoundError(EntityNotFoundError):
    """Account not found."""

    def __init__(self, account_id: str, message: str = "Account not found") -> None:
        self.account_id = account_id
        super().__init__(
            message,
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            details={"account_id": account_id},
        )


class CannotDeleteSelfError(ConflictError):
    """Cannot delete your own account."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot delete your own account",
            code=ErrorCode.CANNOT_DELETE_SELF,
        )


class AccountNoLongerExistsError(AuthError):
    """A validly signed token names an account that has been deleted."""

    code = "ACCOUNT_NOT_FOUND"

    def __init__(self, message: str = "Invalid login token. User not found"):
        super().__init__(message)
