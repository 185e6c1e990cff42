from rollcall_identity.application.queries.list_heads_query import ListHeadsQuery
from rollcall_identity.application.queries.validate_head_identity_query import (
    HeadIdentityStatus,
    ValidateHeadIdentityQuery,
)

__all__ = [
    "HeadIdentityStatus",
    "ListHeadsQuery",
    "ValidateHeadIdentityQuery",
]
