from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from rollcall_identity.domain.account import (
    Account,
    AccountNotFoundError,
    AccountRepository,
    Email,
    EmailAlreadyExistsError,
)

if TYPE_CHECKING:
    from rollcall_identity.application.factories import RepositoryFactory

HEAD_NOT_FOUND = "HOD not found"


async def load_head(account_repository: AccountRepository, account_id: UUID) -> Account:
    """Load a head account or raise ``AccountNotFoundError``."""
    account = await account_repository.find_by_id(account_id)
    if account is None or not account.is_head:
        raise AccountNotFoundError(str(account_id), message=HEAD_NOT_FOUND)
    return account


class UpdateHeadCommand:
    """Command to update another head's name, email or department."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateHeadCommand:
        return cls(account_repository=factory.account_repository())

    async def execute(
        self,
        account_id: UUID,
        name: str | None = None,
        email: str | None = None,
        department: str | None = None,
    ) -> Account:
        account = await load_head(self._account_repo, account_id)

        new_email = Email(email) if email else None
        if new_email is not None and new_email != account.email_obj:
            if await self._account_repo.exists_by_email(new_email):
                raise EmailAlreadyExistsError(new_email.value)

        account.update_profile(name=name, email=new_email, department=department)
        await self._account_repo.save(account)
        return account
