"""Query to check a head identifier before registration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rollcall.domain.shared.exceptions import ErrorCode, ValidationError
from rollcall_identity.domain.head_identity import (
    HeadIdentityNotFoundError,
    HeadIdentityRepository,
)

if TYPE_CHECKING:
    from rollcall_identity.application.factories import RepositoryFactory


@dataclass(frozen=True)
class HeadIdentityStatus:
    head_identifier: str
    department: str
    already_registered: bool

    @property
    def valid(self) -> bool:
        """Whether a head can still register against the identifier."""
        return not self.already_registered


class ValidateHeadIdentityQuery:
    """Look up a pre-provisioned identity and report whether it is free.

    Raises ``HeadIdentityNotFoundError`` for an unknown identifier.
    """

    def __init__(self, head_identity_repository: HeadIdentityRepository):
        self._identity_repo = head_identity_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ValidateHeadIdentityQuery:
        return cls(head_identity_repository=factory.head_identity_repository())

    async def execute(self, head_identifier: str | None) -> HeadIdentityStatus:
        head_identifier = (head_identifier or "").strip()
        if not head_identifier:
            msg = "HOD ID is required"
            raise ValidationError(msg, code=ErrorCode.MISSING_FIELD)

        identity = await self._identity_repo.find_by_identifier(head_identifier)
        if identity is None:
            raise HeadIdentityNotFoundError(head_identifier)

        return HeadIdentityStatus(
            head_identifier=identity.head_identifier,
            department=identity.department,
            already_registered=identity.is_registered,
        )
