"""Rollcall Identity - accounts, department-head identities and access control.

This module handles all identity-related concerns:
- Account management (students and department heads)
- Pre-provisioned head identities and their one-time registration
- Authentication (registration, login, token resolution)
- Authorization (role gate and ownership gate)

Password hashing and token signing come from rollcall_auth; this package
binds them to the identity domain.
"""

from rollcall_identity.application import (
    AccessPolicy,
    AuthenticationService,
    AuthResult,
    RegistrationService,
)
from rollcall_identity.domain.account import (
    Account,
    AccountRepository,
    AccountRole,
    Email,
)
from rollcall_identity.domain.head_identity import (
    HeadIdentity,
    HeadIdentityRepository,
)

__all__ = [
    # Domain
    "Account",
    "AccountRepository",
    "AccountRole",
    "Email",
    "HeadIdentity",
    "HeadIdentityRepository",
    # Application
    "AccessPolicy",
    "AuthResult",
    "AuthenticationService",
    "RegistrationService",
]
