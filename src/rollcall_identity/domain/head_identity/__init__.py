"""Department-head identity domain.

Identities are provisioned out of band and claimed once by a head during
self-registration.
"""

from rollcall_identity.domain.head_identity.aggregates import HeadIdentity
from rollcall_identity.domain.head_identity.exceptions import (
    DepartmentMismatchError,
    HeadIdentityAlreadyExistsError,
    HeadIdentityAlreadyRegisteredError,
    HeadIdentityNotFoundError,
)
from rollcall_identity.domain.head_identity.repositories import (
    HeadIdentityRepository,
)

__all__ = [
    "DepartmentMismatchError",
    "HeadIdentity",
    "HeadIdentityAlreadyExistsError",
    "HeadIdentityAlreadyRegisteredError",
    "HeadIdentityNotFoundError",
    "HeadIdentityRepository",
]
