"""Repository factory protocol for the identity application layer."""

from typing import Any, Protocol

from rollcall_identity.domain.account import AccountRepository
from rollcall_identity.domain.head_identity import HeadIdentityRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def account_repository(self) -> AccountRepository:
        """Get account repository."""
        ...

    def head_identity_repository(self) -> HeadIdentityRepository:
        """Get head identity repository."""
        ...
