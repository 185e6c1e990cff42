from rollcall_identity.application.services.authentication_service import (
    AuthenticationService,
)
from rollcall_identity.application.services.department_locks import (
    DepartmentLockRegistry,
)
from rollcall_identity.application.services.registration_service import (
    HeadRegistration,
    Registration,
    RegistrationService,
    StudentRegistration,
    registration_from_fields,
)

__all__ = [
    "AuthenticationService",
    "DepartmentLockRegistry",
    "HeadRegistration",
    "Registration",
    "RegistrationService",
    "StudentRegistration",
    "registration_from_fields",
]
