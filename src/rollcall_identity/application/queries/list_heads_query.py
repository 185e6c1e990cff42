from __future__ import annotations

from typing import TYPE_CHECKING

from rollcall_identity.domain.account import Account, AccountRepository

if TYPE_CHECKING:
    from rollcall_identity.application.factories import RepositoryFactory


class ListHeadsQuery:
    """Query to list every head account."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListHeadsQuery:
        return cls(account_repository=factory.account_repository())

    async def execute(self) -> list[Account]:
        return await self._account_repo.list_heads()
