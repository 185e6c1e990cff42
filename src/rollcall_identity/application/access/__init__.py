from rollcall_identity.application.access.access_policy import (
    AccessPolicy,
    OwnedResource,
    ResourceLookup,
    ResourceNotFoundError,
)

__all__ = [
    "AccessPolicy",
    "OwnedResource",
    "ResourceLookup",
    "ResourceNotFoundError",
]
