"""Head identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from rollcall_identity.domain.head_identity.aggregates.head_identity import (
    HeadIdentity,
)


class HeadIdentityRepository(ABC):
    """Repository interface for HeadIdentity aggregates."""

    @abstractmethod
    async def find_by_identifier(self, head_identifier: str) -> Optional[HeadIdentity]:
        """Find an identity by its head identifier."""

    @abstractmethod
    async def list_identifiers(self, department_code: str) -> list[str]:
        """All provisioned identifiers of the form HOD_<department_code>_*."""

    @abstractmethod
    async def add(self, identity: HeadIdentity) -> None:
        """Insert a new, unregistered identity."""

    @abstractmethod
    async def claim(
        self,
        head_identifier: str,
        password_hash: str,
        account_id: UUID,
    ) -> bool:
        """Atomically mark an unregistered identity as registered.

        Sets the password hash, the registered flag and the account link in
        one conditional write. Returns False when the identity is missing or
        was already registered, in which case nothing is changed.
        """

    @abstractmethod
    async def update_password_hash(
        self,
        head_identifier: str,
        password_hash: str,
    ) -> None:
        """Replace the stored hash of a registered identity."""
