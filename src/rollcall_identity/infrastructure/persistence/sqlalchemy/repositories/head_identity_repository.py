"""SQLAlchemy implementation of HeadIdentityRepository."""

import logging
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rollcall.domain.shared.time import ensure_tz_aware
from rollcall_identity.domain.account import HeadIdentifierSequence
from rollcall_identity.domain.head_identity import (
    HeadIdentity,
    HeadIdentityAlreadyExistsError,
    HeadIdentityRepository,
)
from rollcall_identity.infrastructure.persistence.sqlalchemy.models import (
    HeadIdentityModel,
)

logger = logging.getLogger(__name__)


class HeadIdentityRepositorySQLAlchemy(HeadIdentityRepository):
    """SQLAlchemy implementation of the HeadIdentityRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_identifier(self, head_identifier: str) -> HeadIdentity | None:
        stmt = select(HeadIdentityModel).where(
            HeadIdentityModel.head_identifier == head_identifier.strip(),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._map_to_domain(model)

    async def list_identifiers(self, department_code: str) -> list[str]:
        prefix = f"{HeadIdentifierSequence.PREFIX}_{department_code}_"
        stmt = select(HeadIdentityModel.head_identifier).where(
            HeadIdentityModel.head_identifier.startswith(prefix, autoescape=True),
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def add(self, identity: HeadIdentity) -> None:
        try:
            async with self._session.begin_nested():
                self._session.add(self._map_to_model(identity))
                await self._session.flush()
        except IntegrityError as e:
            raise HeadIdentityAlreadyExistsError(identity.head_identifier) from e

        logger.info(
            "Provisioned head identity: %s (department: %s)",
            identity.head_identifier,
            identity.department,
        )

    async def claim(
        self,
        head_identifier: str,
        password_hash: str,
        account_id: UUID,
    ) -> bool:
        stmt = (
            update(HeadIdentityModel)
            .where(
                HeadIdentityModel.head_identifier == head_identifier,
                HeadIdentityModel.is_registered.is_(False),
            )
            .values(
                password_hash=password_hash,
                is_registered=True,
                linked_account_id=account_id,
            )
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        claimed = result.rowcount == 1
        if claimed:
            logger.info("Head identity %s claimed by %s", head_identifier, account_id)
        return claimed

    async def update_password_hash(
        self,
        head_identifier: str,
        password_hash: str,
    ) -> None:
        stmt = (
            update(HeadIdentityModel)
            .where(
                HeadIdentityModel.head_identifier == head_identifier,
                HeadIdentityModel.is_registered.is_(True),
            )
            .values(password_hash=password_hash)
            .execution_options(synchronize_session="fetch")
        )
        await self._session.execute(stmt)

    def _map_to_domain(self, model: HeadIdentityModel) -> HeadIdentity:
        return HeadIdentity.reconstitute(
            head_identifier=model.head_identifier,
            name=model.name,
            department=model.department,
            password_hash=model.password_hash,
            is_registered=model.is_registered,
            linked_account_id=model.linked_account_id,
            created_at=ensure_tz_aware(model.created_at),
        )

    def _map_to_model(self, identity: HeadIdentity) -> HeadIdentityModel:
        return HeadIdentityModel(
            head_identifier=identity.head_identifier,
            name=identity.name,
            department=identity.department,
            password_hash=identity.password_hash,
            is_registered=identity.is_registered,
            linked_account_id=identity.linked_account_id,
            created_at=identity.created_at,
        )
