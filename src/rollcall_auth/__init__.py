"""Rollcall Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the attendance domain. It handles:
- Password hashing (bcrypt)
- Bearer token creation and verification (JWT)

Architecture:
    rollcall_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from rollcall_auth import PasswordHashingService, JWTService
"""

from rollcall_auth.exceptions import (
    AuthError,
    AuthenticationRequiredError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    WeakPasswordError,
)
from rollcall_auth.schemas import TokenPayload
from rollcall_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "AuthenticationRequiredError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "TokenExpiredError",
    "WeakPasswordError",
]
