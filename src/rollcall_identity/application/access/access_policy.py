"""Role and ownership checks for authenticated callers."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Optional, Protocol, TypeVar, Union
from uuid import UUID

from rollcall.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
)
from rollcall_auth import AuthenticationRequiredError
from rollcall_identity.domain.account import Account, AccountRole


class OwnedResource(Protocol):
    """Anything that records which account it belongs to."""

    @property
    def owner_id(self) -> UUID: ...


R = TypeVar("R", bound=OwnedResource)

ResourceLookup = Callable[[Any], Awaitable[Optional[R]]]


class ResourceNotFoundError(EntityNotFoundError):
    """The resource named in an ownership check does not exist."""

    def __init__(self, resource_id: Any) -> None:
        self.resource_id = resource_id
        super().__init__(
            "Item not found",
            code=ErrorCode.RESOURCE_NOT_FOUND,
            details={"resource_id": str(resource_id)},
        )


class AccessPolicy:
    """Stateless gates applied after a token has been resolved.

    Examples
    --------
    >>> AccessPolicy.authorize(account, AccountRole.HEAD)
    >>> record = await AccessPolicy.verify_ownership(account, record_id, find)
    """

    @staticmethod
    def authorize(
        account: Account | None,
        *allowed_roles: Union[str, AccountRole],
    ) -> Account:
        """Admit the account when its role is one of ``allowed_roles``.

        Raises
        ------
        AuthenticationRequiredError
            If no account has been resolved for the request
        ForbiddenError
            If the account's role is not allowed
        """
        if account is None:
            raise AuthenticationRequiredError

        roles = [AccountRole(role) for role in allowed_roles]
        if account.role not in roles:
            required = " or ".join(role.value for role in roles)
            msg = f"Access denied. Requires role: {required}"
            raise ForbiddenError(
                msg,
                code=ErrorCode.ROLE_NOT_ALLOWED,
                details={"role": account.role.value},
            )
        return account

    @staticmethod
    async def verify_ownership(
        account: Account | None,
        resource_id: Any,
        lookup: ResourceLookup[R],
    ) -> R:
        """Admit heads, or the account the resource belongs to.

        Returns the loaded resource so the caller does not fetch it twice.

        Raises
        ------
        AuthenticationRequiredError
            If no account has been resolved for the request
        ResourceNotFoundError
            If ``lookup`` finds nothing for ``resource_id``
        ForbiddenError
            If a non-head account does not own the resource
        """
        if account is None:
            raise AuthenticationRequiredError

        resource = await lookup(resource_id)
        if resource is None:
            raise ResourceNotFoundError(resource_id)

        if account.is_head or resource.owner_id == account.id:
            return resource

        msg = "Access denied. You can only access your own data"
        raise ForbiddenError(
            msg,
            code=ErrorCode.NOT_RESOURCE_OWNER,
            details={"resource_id": str(resource_id)},
        )
