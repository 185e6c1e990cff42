from rollcall_identity.domain.head_identity.repositories.head_identity_repository import (  # NOQA: E501
    HeadIdentityRepository,
)

__all__ = ["HeadIdentityRepository"]
