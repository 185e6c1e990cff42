"""Authentication service for login, token resolution and password change."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from rollcall.domain.shared.exceptions import ErrorCode, ValidationError
from rollcall_auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    WeakPasswordError,
)
from rollcall_identity.application.dtos import AuthResult
from rollcall_identity.domain.account import (
    Account,
    AccountNoLongerExistsError,
    AccountRole,
    InvalidEmailError,
)

if TYPE_CHECKING:
    from rollcall_identity.application.factories import RepositoryFactory
    from rollcall_identity.domain.account import AccountRepository
    from rollcall_identity.domain.head_identity import HeadIdentityRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for account authentication.

    Orchestrates rollcall_auth infrastructure (password hashing, JWT tokens)
    with the identity domain to provide:
    - Login for students (by email) and heads (by head identifier)
    - Resolution of a bearer token to a live account
    - Password change

    Every credential failure raises the same ``InvalidCredentialsError`` so a
    caller cannot tell a wrong identifier from a wrong password.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        head_identity_repository: HeadIdentityRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._account_repo = account_repository
        self._identity_repo = head_identity_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ) -> AuthenticationService:
        return cls(
            account_repository=factory.account_repository(),
            head_identity_repository=factory.head_identity_repository(),
            password_service=password_service,
            jwt_service=jwt_service,
        )

    async def login(
        self,
        role: Union[str, AccountRole],
        identifier: str,
        password: str,
    ) -> AuthResult:
        """Authenticate a student by email or a head by head identifier.

        Parameters
        ----------
        role
            Which login path to take
        identifier
            Email for students, head identifier for heads
        password
            The plaintext password

        Returns
        -------
        The account and a freshly issued access token

        Raises
        ------
        InvalidCredentialsError
            For any unknown identifier, wrong password or unusable record
        """
        try:
            account_role = role if isinstance(role, AccountRole) else AccountRole(role)
        except ValueError as e:
            raise InvalidCredentialsError from e

        if account_role == AccountRole.HEAD:
            account = await self._authenticate_head(identifier, password)
        else:
            account = await self._authenticate_student(identifier, password)

        access_token = self._jwt_service.create_access_token(
            account_id=account.id,
            role=account.role.value,
        )
        logger.info("Account logged in: %s (%s)", account.id, account.role.value)
        return AuthResult(account=account, access_token=access_token)

    async def _authenticate_student(self, email: str, password: str) -> Account:
        try:
            account = await self._account_repo.find_student_by_email(email)
        except InvalidEmailError as e:
            raise InvalidCredentialsError from e

        if account is None:
            raise InvalidCredentialsError
        if not self._password_service.verify(password, account.password_hash):
            raise InvalidCredentialsError
        return account

    async def _authenticate_head(self, head_identifier: str, password: str) -> Account:
        head_identifier = (head_identifier or "").strip()
        if not head_identifier:
            raise InvalidCredentialsError

        identity = await self._identity_repo.find_by_identifier(head_identifier)
        if identity is None or not identity.is_registered:
            raise InvalidCredentialsError

        # The identity hash is authoritative for head login
        if not self._password_service.verify(password, identity.password_hash):
            raise InvalidCredentialsError

        # Only the account the identity was claimed by may log in through it
        account = await self._account_repo.find_head_by_identifier(head_identifier)
        if account is None or account.id != identity.linked_account_id:
            logger.error(
                "Integrity fault: registered head identity %s is linked to "
                "account %s but resolves to %s",
                head_identifier,
                identity.linked_account_id,
                account.id if account else None,
            )
            raise InvalidCredentialsError
        return account

    async def resolve_token(self, token: str) -> Account:
        """Verify a bearer token and load the account it was issued for.

        Raises
        ------
        TokenExpiredError
            If the token is past its expiry
        InvalidTokenError
            If the token is malformed or not an access token
        AccountNoLongerExistsError
            If the account has been deleted since the token was issued
        """
        payload = self._jwt_service.verify_token(token)
        if not payload.is_access_token():
            msg = "Not an access token"
            raise InvalidTokenError(msg)

        account = await self._account_repo.find_by_id(payload.account_id)
        if account is None:
            logger.warning("Token presented for deleted account %s", payload.account_id)
            raise AccountNoLongerExistsError
        return account

    async def change_password(
        self,
        account: Account,
        current_password: str,
        new_password: str,
    ) -> None:
        """Change the caller's password.

        A registered head's identity hash is the one checked, and the new
        digest is written to both the identity and the account.
        """
        identity = None
        if account.is_head and account.head_identifier:
            identity = await self._identity_repo.find_by_identifier(
                account.head_identifier,
            )
            if identity is not None and not identity.is_registered:
                identity = None

        current_hash = identity.password_hash if identity else account.password_hash
        if not self._password_service.verify(current_password, current_hash):
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        try:
            new_hash = self._password_service.hash(new_password)
        except WeakPasswordError as e:
            raise ValidationError(e.message, code=ErrorCode.WEAK_PASSWORD) from e

        account.change_password_hash(new_hash)
        await self._account_repo.save(account)
        if identity is not None:
            await self._identity_repo.update_password_hash(
                identity.head_identifier,
                new_hash,
            )

        logger.info("Password changed for account: %s", account.id)
