from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from rollcall_identity.application.commands.update_head_command import load_head
from rollcall_identity.domain.account import AccountRepository, CannotDeleteSelfError

if TYPE_CHECKING:
    from rollcall_identity.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteHeadCommand:
    """Command to delete a head account.

    A pre-provisioned identity the head registered against stays registered;
    it is never handed out again.
    """

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteHeadCommand:
        return cls(account_repository=factory.account_repository())

    async def execute(self, account_id: UUID, requesting_account_id: UUID) -> None:
        if account_id == requesting_account_id:
            raise CannotDeleteSelfError

        account = await load_head(self._account_repo, account_id)
        await self._account_repo.delete(account.id)
        logger.info(
            "Head account deleted: %s (%s) by %s",
            account.id,
            account.head_identifier,
            requesting_account_id,
        )
