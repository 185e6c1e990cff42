"""SQLAlchemy implementation of AccountRepository."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rollcall.domain.shared.time import ensure_tz_aware
from rollcall_identity.domain.account import (
    Account,
    AccountRepository,
    AccountRole,
    Email,
    EmailAlreadyExistsError,
    HeadIdentifierAlreadyExistsError,
    HeadIdentifierSequence,
    RollNumberAlreadyExistsError,
)
from rollcall_identity.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
)

logger = logging.getLogger(__name__)

_UNIQUE_CONSTRAINTS = (
    ("head_identifier", "uq_accounts_head_identifier"),
    ("roll_number", "uq_accounts_student_roll_number"),
    ("email", "uq_accounts_email"),
)


def _email_value(email: Union[str, Email]) -> str:
    return email.value if isinstance(email, Email) else Email(email).value


class AccountRepositorySQLAlchemy(AccountRepository):
    """SQLAlchemy implementation of the AccountRepository interface.

    Writes run inside a savepoint so a unique-index violation rolls back
    only the failed statement and leaves the session usable.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        model = await self._find_model_by_id(account_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.email == _email_value(email))
        return await self._find_one(stmt)

    async def find_student_by_email(self, email: Union[str, Email]) -> Account | None:
        stmt = select(AccountModel).where(
            AccountModel.email == _email_value(email),
            AccountModel.role == AccountRole.STUDENT.value,
        )
        return await self._find_one(stmt)

    async def find_head_by_identifier(self, head_identifier: str) -> Account | None:
        stmt = select(AccountModel).where(
            AccountModel.head_identifier == head_identifier.strip(),
            AccountModel.role == AccountRole.HEAD.value,
        )
        return await self._find_one(stmt)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        stmt = select(AccountModel.id).where(AccountModel.email == _email_value(email))
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def exists_student_with_roll_number(
        self,
        roll_number: str,
        exclude_id: UUID | None = None,
    ) -> bool:
        stmt = select(AccountModel.id).where(
            AccountModel.roll_number == roll_number,
            AccountModel.role == AccountRole.STUDENT.value,
        )
        if exclude_id is not None:
            stmt = stmt.where(AccountModel.id != exclude_id)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def list_head_identifiers(self, department_code: str) -> list[str]:
        prefix = f"{HeadIdentifierSequence.PREFIX}_{department_code}_"
        stmt = select(AccountModel.head_identifier).where(
            AccountModel.head_identifier.startswith(prefix, autoescape=True),
        )
        result = await self._session.execute(stmt)
        return [identifier for identifier in result.scalars().all() if identifier]

    async def list_heads(self) -> list[Account]:
        stmt = (
            select(AccountModel)
            .where(AccountModel.role == AccountRole.HEAD.value)
            .order_by(AccountModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def add(self, account: Account) -> None:
        try:
            async with self._session.begin_nested():
                self._session.add(self._map_to_model(account))
                await self._session.flush()
        except IntegrityError as e:
            raise self._translate_integrity_error(e, account) from e

        logger.info(
            "Created account: %s (email: %s, role: %s)",
            account.id,
            account.email,
            account.role.value,
        )

    async def save(self, account: Account) -> None:
        model = await self._find_model_by_id(account.id)
        if model is None:
            await self.add(account)
            return

        try:
            async with self._session.begin_nested():
                self._update_model(model, account)
                await self._session.flush()
        except IntegrityError as e:
            raise self._translate_integrity_error(e, account) from e

        logger.debug("Updated account: %s", account.id)

    async def delete(self, account_id: UUID) -> bool:
        stmt = delete(AccountModel).where(AccountModel.id == account_id)
        result = await self._session.execute(stmt)
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Deleted account: %s", account_id)
        return deleted

    async def _find_one(self, stmt) -> Account | None:
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._map_to_domain(model)

    async def _find_model_by_id(self, account_id: UUID) -> AccountModel | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _translate_integrity_error(
        self,
        error: IntegrityError,
        account: Account,
    ) -> Exception:
        # SQLite names the column, PostgreSQL the constraint
        message = str(error.orig)
        for column, constraint in _UNIQUE_CONSTRAINTS:
            if f"accounts.{column}" in message or constraint in message:
                if column == "head_identifier":
                    return HeadIdentifierAlreadyExistsError(account.head_identifier or "")
                if column == "roll_number":
                    return RollNumberAlreadyExistsError(account.roll_number or "")
                return EmailAlreadyExistsError(account.email)
        return error

    def _map_to_domain(self, model: AccountModel) -> Account:
        return Account.reconstitute(
            id=model.id,
            email=model.email,
            role=model.role,
            password_hash=model.password_hash,
            name=model.name,
            head_identifier=model.head_identifier,
            roll_number=model.roll_number,
            department=model.department,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, account: Account) -> AccountModel:
        return AccountModel(
            id=account.id,
            email=account.email,
            name=account.name,
            password_hash=account.password_hash,
            role=account.role.value,
            head_identifier=account.head_identifier,
            roll_number=account.roll_number,
            department=account.department,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

    def _update_model(self, model: AccountModel, account: Account) -> None:
        model.email = account.email
        model.name = account.name
        model.password_hash = account.password_hash
        model.roll_number = account.roll_number
        model.department = account.department
        model.updated_at = account.updated_at
