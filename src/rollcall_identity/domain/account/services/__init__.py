from rollcall_identity.domain.account.services.head_identifier_sequence import (
    HeadIdentifierSequence,
)

__all__ = ["HeadIdentifierSequence"]
