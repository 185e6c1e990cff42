from __future__ import annotations

from typing import TYPE_CHECKING

from rollcall_identity.domain.account import (
    Account,
    AccountRepository,
    Email,
    EmailAlreadyExistsError,
)

if TYPE_CHECKING:
    from rollcall_identity.application.factories import RepositoryFactory


class UpdateProfileCommand:
    """Command to update the caller's own name, email or department."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateProfileCommand:
        return cls(account_repository=factory.account_repository())

    async def execute(
        self,
        account: Account,
        name: str | None = None,
        email: str | None = None,
        department: str | None = None,
    ) -> Account:
        new_email = Email(email) if email else None
        if new_email is not None and new_email != account.email_obj:
            if await self._account_repo.exists_by_email(new_email):
                raise EmailAlreadyExistsError(new_email.value)

        account.update_profile(name=name, email=new_email, department=department)
        await self._account_repo.save(account)
        return account
