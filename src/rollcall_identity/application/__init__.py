"""Identity application layer: use cases over the identity domain."""

from rollcall_identity.application.access import AccessPolicy, ResourceNotFoundError
from rollcall_identity.application.dtos import AuthResult
from rollcall_identity.application.services import (
    AuthenticationService,
    DepartmentLockRegistry,
    HeadRegistration,
    RegistrationService,
    StudentRegistration,
    registration_from_fields,
)

__all__ = [
    "AccessPolicy",
    "AuthResult",
    "AuthenticationService",
    "DepartmentLockRegistry",
    "HeadRegistration",
    "RegistrationService",
    "ResourceNotFoundError",
    "StudentRegistration",
    "registration_from_fields",
]
