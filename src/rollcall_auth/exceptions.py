"""Authentication exceptions.

These exceptions are raised by the rollcall_auth package and by the identity
services built on top of it. Every AuthError carries a stable ``code`` so the
API can tell clients *why* a credential was refused without revealing which
half of a login was wrong.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    code = "AUTHENTICATION_FAILED"

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class AuthenticationRequiredError(AuthError):
    """Raised when an operation needs a verified caller and none is present."""

    code = "AUTHENTICATION_REQUIRED"

    def __init__(self, message: str = "Please log in first. No login token found"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Raised when a token is malformed, unsigned or signed with another key."""

    code = "TOKEN_INVALID"

    def __init__(self, message: str = "Invalid login token"):
        super().__init__(message)


class TokenExpiredError(AuthError):
    """Raised when a correctly signed token is past its expiry."""

    code = "TOKEN_EXPIRED"

    def __init__(
        self,
        message: str = "Your session has expired. Please log in again",
    ):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when an identifier or password is incorrect during login."""

    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    code = "WEAK_PASSWORD"

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)
