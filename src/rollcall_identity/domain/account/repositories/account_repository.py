"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from rollcall_identity.domain.account.aggregates.account import Account
from rollcall_identity.domain.account.value_objects.email import Email


class AccountRepository(ABC):
    """Repository interface for Account aggregates.

    Implementations must enforce uniqueness of email (all roles), head
    identifier (heads) and roll number (students only) and translate a
    collision into the matching ``*AlreadyExistsError``.
    """

    @abstractmethod
    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        """Find an account by its ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[Account]:
        """Find an account of any role by email address."""

    @abstractmethod
    async def find_student_by_email(self, email: Union[str, Email]) -> Optional[Account]:
        """Find a student account by email address."""

    @abstractmethod
    async def find_head_by_identifier(self, head_identifier: str) -> Optional[Account]:
        """Find the head account carrying the given head identifier."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if any account uses the given email."""

    @abstractmethod
    async def exists_student_with_roll_number(
        self,
        roll_number: str,
        exclude_id: UUID | None = None,
    ) -> bool:
        """Check if a student other than ``exclude_id`` holds the roll number."""

    @abstractmethod
    async def list_head_identifiers(self, department_code: str) -> list[str]:
        """List head identifiers of the form ``HOD_<department_code>_*``."""

    @abstractmethod
    async def list_heads(self) -> list[Account]:
        """List all head accounts, newest first."""

    @abstractmethod
    async def add(self, account: Account) -> None:
        """Insert a new account."""

    @abstractmethod
    async def save(self, account: Account) -> None:
        """Update an existing account."""

    @abstractmethod
    async def delete(self, account_id: UUID) -> bool:
        """Delete an account by ID. Returns False when nothing was deleted."""
