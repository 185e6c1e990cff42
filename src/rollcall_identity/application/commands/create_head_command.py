from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from rollcall.domain.shared.exceptions import ConflictError, ErrorCode, ValidationError
from rollcall_auth import PasswordHashingService, WeakPasswordError
from rollcall_identity.domain.account import (
    Account,
    AccountRepository,
    Email,
    EmailAlreadyExistsError,
    HeadIdentifierAlreadyExistsError,
    HeadIdentifierSequence,
)
from rollcall_identity.domain.head_identity import HeadIdentityRepository

if TYPE_CHECKING:
    from rollcall_identity.application.factories import RepositoryFactory
    from rollcall_identity.application.services import DepartmentLockRegistry

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENT = "Not Assigned"
MAX_IDENTIFIER_ATTEMPTS = 5


class CreateHeadCommand:
    """
    Command to create a head account directly.

    Used by an existing head. Provisioned head identities are only read:
    their identifiers are reserved for the heads who will register against
    them, so they are skipped when generating and rejected when given
    explicitly.

    Within one process the department lock is held across read, compute,
    insert and the caller's commit. Across processes uniqueness rests on
    the unique index on the head identifier: a rejected insert moves on to
    the next number, up to ``MAX_IDENTIFIER_ATTEMPTS`` times.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        head_identity_repository: HeadIdentityRepository,
        password_service: PasswordHashingService,
        department_locks: DepartmentLockRegistry,
    ):
        self._account_repo = account_repository
        self._identity_repo = head_identity_repository
        self._password_service = password_service
        self._locks = department_locks

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
        department_locks: DepartmentLockRegistry,
    ) -> CreateHeadCommand:
        return cls(
            account_repository=factory.account_repository(),
            head_identity_repository=factory.head_identity_repository(),
            password_service=password_service,
            department_locks=department_locks,
        )

    async def execute(  # NOQA: PLR0913
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        department: str | None = None,
        head_identifier: str | None = None,
        commit: Callable[[], Awaitable[None]] | None = None,
    ) -> Account:
        """Create the account, then await ``commit`` if given.

        For generated identifiers ``commit`` runs while the department lock
        is still held, so the next request in this process reads the
        committed identifier.
        """
        if not (name or "").strip() or not email or not password:
            msg = "Please provide name, email, and password"
            raise ValidationError(msg, code=ErrorCode.MISSING_FIELD)

        try:
            password_hash = self._password_service.hash(password)
        except WeakPasswordError as e:
            raise ValidationError(e.message, code=ErrorCode.WEAK_PASSWORD) from e

        email_obj = Email(email)
        if await self._account_repo.exists_by_email(email_obj):
            raise EmailAlreadyExistsError(email_obj.value)

        department = (department or "").strip() or DEFAULT_DEPARTMENT
        head_identifier = (head_identifier or "").strip()

        if head_identifier:
            if await self._identity_repo.find_by_identifier(head_identifier):
                raise HeadIdentifierAlreadyExistsError(head_identifier)
            account = Account.create_head(
                email=email_obj,
                password_hash=password_hash,
                head_identifier=head_identifier,
                name=name,
                department=department,
            )
            await self._account_repo.add(account)
            if commit is not None:
                await commit()
        else:
            account = await self._create_with_generated_identifier(
                name,
                email_obj,
                password_hash,
                department,
                commit,
            )

        logger.info(
            "Head account created: %s (%s) as %s",
            account.email,
            account.id,
            account.head_identifier,
        )
        return account

    async def _create_with_generated_identifier(
        self,
        name: str,
        email: Email,
        password_hash: str,
        department: str,
        commit: Callable[[], Awaitable[None]] | None,
    ) -> Account:
        code = HeadIdentifierSequence.department_code(department)
        rejected: set[str] = set()
        reserved = await self._identity_repo.list_identifiers(code)

        async with self._locks.lock_for(department):
            for _ in range(MAX_IDENTIFIER_ATTEMPTS):
                existing = await self._account_repo.list_head_identifiers(code)
                candidate = HeadIdentifierSequence.next_identifier(
                    department,
                    [*existing, *reserved, *rejected],
                )
                account = Account.create_head(
                    email=email,
                    password_hash=password_hash,
                    head_identifier=candidate,
                    name=name,
                    department=department,
                )
                try:
                    await self._account_repo.add(account)
                except HeadIdentifierAlreadyExistsError:
                    logger.warning("Head identifier %s taken, retrying", candidate)
                    rejected.add(candidate)
                    continue
                if commit is not None:
                    await commit()
                return account

        msg = f"Could not allocate a head identifier for department {department}"
        raise ConflictError(msg, code=ErrorCode.HEAD_IDENTIFIER_ALREADY_EXISTS)
