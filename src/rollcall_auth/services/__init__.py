"""Authentication services.

Provides password hashing and JWT token management.
"""

from rollcall_auth.services.jwt_service import JWTService
from rollcall_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
]
