"""Account domain: the principals that can log in.

This domain handles:
- Account aggregate (student or department head)
- Email value object and role enum
- Head identifier generation
"""

from rollcall_identity.domain.account.aggregates import Account
from rollcall_identity.domain.account.exceptions import (
    AccountNoLongerExistsError,
    AccountNotFoundError,
    CannotDeleteSelfError,
    EmailAlreadyExistsError,
    HeadIdentifierAlreadyExistsError,
    InvalidEmailError,
    RollNumberAlreadyExistsError,
)
from rollcall_identity.domain.account.repositories import AccountRepository
from rollcall_identity.domain.account.services import HeadIdentifierSequence
from rollcall_identity.domain.account.value_objects import AccountRole, Email

__all__ = [
    "Account",
    "AccountNoLongerExistsError",
    "AccountNotFoundError",
    "AccountRepository",
    "AccountRole",
    "CannotDeleteSelfError",
    "Email",
    "EmailAlreadyExistsError",
    "HeadIdentifierAlreadyExistsError",
    "HeadIdentifierSequence",
    "InvalidEmailError",
    "RollNumberAlreadyExistsError",
]
