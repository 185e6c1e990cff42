"""Data transfer objects returned by the identity application services."""

from dataclasses import dataclass

from rollcall_identity.domain.account import Account


@dataclass(frozen=True)
class AuthResult:
    """A freshly authenticated account and the token issued for it."""

    account: Account
    access_token: str
