"""Account lookup router, guarded by the ownership gate."""

from uuid import UUID

from fastapi import APIRouter, Depends

from rollcall.presentation.api.dependencies import require_ownership
from rollcall.presentation.api.schemas.auth import AccountResponse
from rollcall_identity.application.access import ResourceLookup
from rollcall_identity.domain.account import Account
from rollcall_identity.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyRepositoryFactory,
)

router = APIRouter(prefix="/accounts", tags=["Accounts"])


def account_lookup(factory: SQLAlchemyRepositoryFactory) -> ResourceLookup:
    repository = factory.account_repository()

    async def _find(resource_id: str) -> Account | None:
        try:
            account_id = UUID(resource_id)
        except ValueError:
            return None
        return await repository.find_by_id(account_id)

    return _find


@router.get(
    "/{resource_id}",
    summary="Get an account",
    responses={
        200: {"description": "The account"},
        403: {"description": "Students may only read their own account"},
        404: {"description": "No account with this id"},
    },
)
async def get_account(
    account: Account = Depends(require_ownership(account_lookup)),
) -> AccountResponse:
    """Heads can read any account; students only their own."""
    return AccountResponse.from_account(account)
