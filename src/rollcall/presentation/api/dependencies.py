"""FastAPI dependency injection for the rollcall API.

Provides dependencies for:
- Database sessions
- Authentication (current account from the bearer token)
- Role and ownership gates
- Service instances
"""

import logging
from collections.abc import Callable
from typing import Annotated, AsyncGenerator, Union

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from rollcall.presentation.api.config import get_api_settings
from rollcall_auth import (
    AuthenticationRequiredError,
    AuthError,
    JWTService,
    PasswordHashingService,
)
from rollcall_config.settings import Settings
from rollcall_identity.application import (
    AccessPolicy,
    AuthenticationService,
    DepartmentLockRegistry,
    RegistrationService,
)
from rollcall_identity.application.access import OwnedResource, ResourceLookup
from rollcall_identity.domain.account import Account, AccountRole
from rollcall_identity.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyRepositoryFactory,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the session maker the
    application was started with.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Get the repository factory bound to the request's session."""
    return SQLAlchemyRepositoryFactory(session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_days=settings.jwt_access_token_expire_days,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


def get_department_locks(request: Request) -> DepartmentLockRegistry:
    """Get the process-wide department lock registry."""
    return request.app.state.department_locks


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordService = Annotated[PasswordHashingService, Depends(get_password_service)]
DepartmentLocks = Annotated[DepartmentLockRegistry, Depends(get_department_locks)]


async def get_authentication_service(
    factory: RepoFactory,
    jwt_service: JWTServiceDep,
    password_service: PasswordService,
) -> AuthenticationService:
    """Get authentication service (login, token resolution, password change)."""
    return AuthenticationService.from_factory(factory, password_service, jwt_service)


async def get_registration_service(
    factory: RepoFactory,
    jwt_service: JWTServiceDep,
    password_service: PasswordService,
) -> RegistrationService:
    """Get registration service for students and heads."""
    return RegistrationService.from_factory(factory, password_service, jwt_service)


# Type aliases for injected services
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
RegService = Annotated[RegistrationService, Depends(get_registration_service)]


# -----------------------------------------------------------------------------
# Current Account (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_account(
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Account:
    """
    FastAPI dependency to get the current authenticated account.

    Extracts the bearer token from the Authorization header, verifies it and
    loads the account it was issued for.

    Raises
    ------
    AuthenticationRequiredError
        If no bearer token was sent
    TokenExpiredError
        If the token is past its expiry
    InvalidTokenError
        If the token is malformed or wrongly signed
    AccountNoLongerExistsError
        If the account has been deleted
    """
    if credentials is None:
        raise AuthenticationRequiredError

    try:
        return await auth_service.resolve_token(credentials.credentials)
    except AuthError as e:
        logger.warning("Rejected bearer token: %s", e.code)
        raise


# Type alias for injected current account
CurrentAccount = Annotated[Account, Depends(get_current_account)]


def require_roles(*roles: Union[str, AccountRole]) -> Callable:
    """Build a dependency admitting only accounts with one of ``roles``."""

    async def _require_roles(account: CurrentAccount) -> Account:
        return AccessPolicy.authorize(account, *roles)

    return _require_roles


# Type alias for a head-only route
HeadAccount = Annotated[Account, Depends(require_roles(AccountRole.HEAD))]


def require_ownership(
    lookup_factory: Callable[[SQLAlchemyRepositoryFactory], ResourceLookup],
) -> Callable:
    """Build a dependency for routes with a ``{resource_id}`` path parameter.

    ``lookup_factory`` turns the request's repository factory into the async
    lookup used by the ownership gate. The dependency returns the resource.
    """

    async def _require_ownership(
        resource_id: str,
        account: CurrentAccount,
        factory: RepoFactory,
    ) -> OwnedResource:
        return await AccessPolicy.verify_ownership(
            account,
            resource_id,
            lookup_factory(factory),
        )

    return _require_ownership
