from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from rollcall.domain.shared.exceptions import ErrorCode, ValidationError
from rollcall_auth import PasswordHashingService, WeakPasswordError
from rollcall_identity.application.commands.update_head_command import load_head
from rollcall_identity.domain.account import AccountRepository
from rollcall_identity.domain.head_identity import HeadIdentityRepository

if TYPE_CHECKING:
    from rollcall_identity.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class ResetHeadPasswordCommand:
    """Command to set a new password on another head's account.

    When the head registered against a pre-provisioned identity, the same
    digest is written to the identity so head login keeps working.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        head_identity_repository: HeadIdentityRepository,
        password_service: PasswordHashingService,
    ):
        self._account_repo = account_repository
        self._identity_repo = head_identity_repository
        self._password_service = password_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
    ) -> ResetHeadPasswordCommand:
        return cls(
            account_repository=factory.account_repository(),
            head_identity_repository=factory.head_identity_repository(),
            password_service=password_service,
        )

    async def execute(self, account_id: UUID, new_password: str | None) -> None:
        try:
            new_hash = self._password_service.hash(new_password or "")
        except WeakPasswordError as e:
            raise ValidationError(e.message, code=ErrorCode.WEAK_PASSWORD) from e

        account = await load_head(self._account_repo, account_id)
        account.change_password_hash(new_hash)
        await self._account_repo.save(account)

        identity = await self._identity_repo.find_by_identifier(account.head_identifier)
        if identity is not None and identity.linked_account_id == account.id:
            await self._identity_repo.update_password_hash(
                identity.head_identifier,
                new_hash,
            )

        logger.info("Password reset for head account: %s", account.id)
