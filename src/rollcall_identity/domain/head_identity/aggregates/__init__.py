from rollcall_identity.domain.head_identity.aggregates.head_identity import (
    HeadIdentity,
)

__all__ = ["HeadIdentity"]
