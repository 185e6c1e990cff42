"""Head administration router. Every route requires the head role."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from rollcall.presentation.api.dependencies import (
    DepartmentLocks,
    HeadAccount,
    PasswordService,
    RepoFactory,
)
from rollcall.presentation.api.schemas.auth import AccountResponse
from rollcall.presentation.api.schemas.hods import (
    CreateHeadRequest,
    ResetPasswordRequest,
    UpdateHeadRequest,
)
from rollcall_identity.application.commands import (
    CreateHeadCommand,
    DeleteHeadCommand,
    ResetHeadPasswordCommand,
    UpdateHeadCommand,
)
from rollcall_identity.application.queries import ListHeadsQuery

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hods", tags=["Heads"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a head account",
    responses={
        201: {"description": "Head account created"},
        400: {"description": "Missing field or weak password"},
        403: {"description": "Head role required"},
        409: {"description": "Email or head identifier already in use"},
    },
)
async def create_head(
    request: CreateHeadRequest,
    head: HeadAccount,
    factory: RepoFactory,
    password_service: PasswordService,
    department_locks: DepartmentLocks,
) -> AccountResponse:
    """
    Create a head account without a pre-provisioned identity.

    The head identifier is generated from the department when omitted.
    """
    command = CreateHeadCommand.from_factory(
        factory,
        password_service,
        department_locks,
    )
    try:
        account = await command.execute(
            name=request.name,
            email=request.email,
            password=request.password,
            department=request.department,
            head_identifier=request.head_identifier,
            commit=factory.session.commit,
        )
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Head %s created head account %s", head.id, account.id)
    return AccountResponse.from_account(account)


@router.get(
    "",
    summary="List head accounts",
    responses={
        200: {"description": "All head accounts"},
        403: {"description": "Head role required"},
    },
)
async def list_heads(
    _head: HeadAccount,  # Used for authorization check
    factory: RepoFactory,
) -> list[AccountResponse]:
    heads = await ListHeadsQuery.from_factory(factory).execute()
    return [AccountResponse.from_account(account) for account in heads]


@router.put(
    "/{account_id}",
    summary="Update a head account",
    responses={
        200: {"description": "Head account updated"},
        404: {"description": "No head account with this id"},
        409: {"description": "Email already in use"},
    },
)
async def update_head(
    account_id: UUID,
    request: UpdateHeadRequest,
    _head: HeadAccount,
    factory: RepoFactory,
) -> AccountResponse:
    command = UpdateHeadCommand.from_factory(factory)
    try:
        account = await command.execute(
            account_id,
            name=request.name,
            email=request.email,
            department=request.department,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return AccountResponse.from_account(account)


@router.delete(
    "/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a head account",
    responses={
        204: {"description": "Head account deleted"},
        404: {"description": "No head account with this id"},
        409: {"description": "Cannot delete your own account"},
    },
)
async def delete_head(
    account_id: UUID,
    head: HeadAccount,
    factory: RepoFactory,
) -> None:
    command = DeleteHeadCommand.from_factory(factory)
    try:
        await command.execute(account_id, requesting_account_id=head.id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise


@router.put(
    "/{account_id}/reset-password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reset a head account's password",
    responses={
        204: {"description": "Password reset"},
        400: {"description": "New password too weak"},
        404: {"description": "No head account with this id"},
    },
)
async def reset_head_password(
    account_id: UUID,
    request: ResetPasswordRequest,
    head: HeadAccount,
    factory: RepoFactory,
    password_service: PasswordService,
) -> None:
    command = ResetHeadPasswordCommand.from_factory(factory, password_service)
    try:
        await command.execute(account_id, request.new_password)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Head %s reset the password of %s", head.id, account_id)
