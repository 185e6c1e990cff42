"""Authentication router for registration, login and the caller's profile."""

import logging

from fastapi import APIRouter, status

from rollcall.presentation.api.dependencies import (
    AuthService,
    CurrentAccount,
    DBSession,
    RegService,
    RepoFactory,
    SettingsDep,
)
from rollcall.presentation.api.schemas.auth import (
    AccountResponse,
    AuthResponse,
    ChangePasswordRequest,
    HeadIdentityValidationResponse,
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
    ValidateHeadIdentityRequest,
)
from rollcall_config.settings import Settings
from rollcall_identity.application import AuthResult, registration_from_fields
from rollcall_identity.application.commands import UpdateProfileCommand
from rollcall_identity.application.queries import ValidateHeadIdentityQuery

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(result: AuthResult, settings: Settings) -> AuthResponse:
    return AuthResponse(
        account=AccountResponse.from_account(result.account),
        access_token=result.access_token,
        expires_in=settings.access_token_expire_seconds,
    )


@router.post(
    "/validate-head-identity",
    summary="Check a head identifier before registering",
    responses={
        200: {"description": "Identifier exists; see already_registered"},
        400: {"description": "Identifier missing"},
        404: {"description": "Unknown identifier"},
    },
)
async def validate_head_identity(
    request: ValidateHeadIdentityRequest,
    factory: RepoFactory,
) -> HeadIdentityValidationResponse:
    query = ValidateHeadIdentityQuery.from_factory(factory)
    result = await query.execute(request.head_identifier)
    return HeadIdentityValidationResponse(
        valid=result.valid,
        department=result.department,
        already_registered=result.already_registered,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a student or a department head",
    responses={
        201: {"description": "Account registered"},
        400: {"description": "Missing field, invalid email or weak password"},
        404: {"description": "Unknown head identifier"},
        409: {"description": "Email, roll number or head identifier taken"},
    },
)
async def register(
    request: RegisterRequest,
    registration_service: RegService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Register a new account.

    Students supply a name and roll number. Heads supply the head identifier
    they were given and its department.
    """
    registration = registration_from_fields(
        role=request.role,
        email=request.email,
        password=request.password,
        name=request.name,
        roll_number=request.roll_number,
        department=request.department,
        head_identifier=request.head_identifier,
    )

    try:
        result = await registration_service.register(registration)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _create_auth_response(result, settings)


@router.post(
    "/login",
    summary="Authenticate",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Authenticate a student by email or a head by head identifier.

    The same error is returned whichever half of the credentials was wrong.
    """
    result = await auth_service.login(
        role=request.role,
        identifier=request.identifier,
        password=request.password,
    )
    return _create_auth_response(result, settings)


@router.get(
    "/me",
    summary="Get the current account",
    responses={
        200: {"description": "Current account"},
        401: {"description": "Missing, expired or invalid token"},
    },
)
async def get_me(account: CurrentAccount) -> AccountResponse:
    return AccountResponse.from_account(account)


@router.put(
    "/profile",
    summary="Update the current account's profile",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid email"},
        409: {"description": "Email already in use"},
    },
)
async def update_profile(
    request: UpdateProfileRequest,
    account: CurrentAccount,
    factory: RepoFactory,
) -> AccountResponse:
    command = UpdateProfileCommand.from_factory(factory)
    try:
        updated = await command.execute(
            account,
            name=request.name,
            email=request.email,
            department=request.department,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Profile updated: %s", updated.id)
    return AccountResponse.from_account(updated)


@router.put(
    "/change-password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change the current account's password",
    responses={
        204: {"description": "Password changed"},
        400: {"description": "New password too weak"},
        401: {"description": "Current password incorrect"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    account: CurrentAccount,
    auth_service: AuthService,
    session: DBSession,
) -> None:
    try:
        await auth_service.change_password(
            account,
            current_password=request.current_password,
            new_password=request.new_password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise
