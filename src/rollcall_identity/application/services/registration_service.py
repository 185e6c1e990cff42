"""Self-registration of students and department heads."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from rollcall.domain.shared.exceptions import ErrorCode, ValidationError
from rollcall_auth import JWTService, PasswordHashingService, WeakPasswordError
from rollcall_identity.application.dtos import AuthResult
from rollcall_identity.domain.account import (
    Account,
    AccountRole,
    Email,
    EmailAlreadyExistsError,
    HeadIdentifierAlreadyExistsError,
    RollNumberAlreadyExistsError,
)
from rollcall_identity.domain.head_identity import (
    DepartmentMismatchError,
    HeadIdentity,
    HeadIdentityAlreadyRegisteredError,
    HeadIdentityNotFoundError,
)

if TYPE_CHECKING:
    from rollcall_identity.application.factories import RepositoryFactory
    from rollcall_identity.domain.account import AccountRepository
    from rollcall_identity.domain.head_identity import HeadIdentityRepository

logger = logging.getLogger(__name__)

DEFAULT_HEAD_NAME = "HOD"


@dataclass(frozen=True)
class StudentRegistration:
    email: str
    password: str
    name: str
    roll_number: str
    department: str | None = None


@dataclass(frozen=True)
class HeadRegistration:
    email: str
    password: str
    head_identifier: str
    department: str
    name: str | None = None


Registration = Union[StudentRegistration, HeadRegistration]


def _present(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def registration_from_fields(  # NOQA: PLR0913
    role: str | None,
    email: str | None,
    password: str | None,
    name: str | None = None,
    roll_number: str | None = None,
    department: str | None = None,
    head_identifier: str | None = None,
) -> Registration:
    """Build the role-specific registration input from loosely typed fields.

    A missing role means student registration.

    Raises
    ------
    ValidationError
        If a field required by the selected role is missing or the role is
        unknown.
    """
    if not _present(email) or not password:
        msg = "Please provide your email and password"
        raise ValidationError(msg, code=ErrorCode.MISSING_FIELD)

    try:
        account_role = AccountRole(role) if _present(role) else AccountRole.STUDENT
    except ValueError as e:
        msg = "Invalid role. Must be either student or hod"
        raise ValidationError(msg, code=ErrorCode.INVALID_ROLE) from e

    if account_role == AccountRole.STUDENT:
        if not _present(name):
            msg = "Please provide your name"
            raise ValidationError(msg, code=ErrorCode.MISSING_FIELD)
        if not _present(roll_number):
            msg = "Roll number is required for student registration"
            raise ValidationError(msg, code=ErrorCode.MISSING_FIELD)
        return StudentRegistration(
            email=email,
            password=password,
            name=_present(name),
            roll_number=_present(roll_number),
            department=_present(department),
        )

    if not _present(department):
        msg = "Department is required for HOD registration"
        raise ValidationError(msg, code=ErrorCode.MISSING_FIELD)
    if not _present(head_identifier):
        msg = "HOD ID is required for HOD registration"
        raise ValidationError(msg, code=ErrorCode.MISSING_FIELD)
    return HeadRegistration(
        email=email,
        password=password,
        head_identifier=_present(head_identifier),
        department=department,
        name=_present(name),
    )


class RegistrationService:
    """
    Application service for self-registration.

    Each registration runs an explicit, ordered list of checks before any
    write happens. The first failing check decides the error.

    Student checks:
    1. password policy
    2. email unused by any account
    3. roll number unused by any other student

    Head checks:
    1. password policy
    2. pre-provisioned identity exists
    3. identity not yet registered
    4. department matches the identity exactly
    5. email unused by any account

    A head registration then creates the account first and only afterwards
    marks the identity registered with a single conditional write. An
    identity is therefore never flagged registered without its account.
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
    ) -> RegistrationService:
        return cls(
            account_repository=factory.account_repository(),
            head_identity_repository=factory.head_identity_repository(),
            password_service=password_service,
            jwt_service=jwt_service,
        )

    async def register(self, registration: Registration) -> AuthResult:
        if isinstance(registration, HeadRegistration):
            account = await self._register_head(registration)
        else:
            account = await self._register_student(registration)

        access_token = self._jwt_service.create_access_token(
            account_id=account.id,
            role=account.role.value,
        )
        return AuthResult(account=account, access_token=access_token)

    async def _register_student(self, registration: StudentRegistration) -> Account:
        self._check_password_policy(registration.password)
        email = Email(registration.email)
        await self._check_email_available(email)
        if await self._account_repo.exists_student_with_roll_number(
            registration.roll_number,
        ):
            raise RollNumberAlreadyExistsError(registration.roll_number)

        account = Account.create_student(
            email=email,
            password_hash=self._password_service.hash(registration.password),
            name=registration.name,
            roll_number=registration.roll_number,
            department=registration.department,
        )
        await self._account_repo.add(account)

        logger.info("Student registered: %s (%s)", account.email, account.id)
        return account

    async def _register_head(self, registration: HeadRegistration) -> Account:
        self._check_password_policy(registration.password)
        identity = await self._load_claimable_identity(registration.head_identifier)
        if not identity.matches_department(registration.department):
            raise DepartmentMismatchError(
                identity.head_identifier,
                registration.department,
            )
        email = Email(registration.email)
        await self._check_email_available(email)

        # One digest, stored on both the identity and the account
        password_hash = self._password_service.hash(registration.password)
        account = Account.create_head(
            email=email,
            password_hash=password_hash,
            head_identifier=identity.head_identifier,
            name=identity.name or registration.name or DEFAULT_HEAD_NAME,
            department=identity.department,
        )
        try:
            await self._account_repo.add(account)
        except HeadIdentifierAlreadyExistsError as e:
            # A concurrent registration for the same identity got there first
            raise HeadIdentityAlreadyRegisteredError(identity.head_identifier) from e

        claimed = await self._identity_repo.claim(
            identity.head_identifier,
            password_hash=password_hash,
            account_id=account.id,
        )
        if not claimed:
            await self._account_repo.delete(account.id)
            logger.warning(
                "Head identity %s was claimed concurrently; removed account %s",
                identity.head_identifier,
                account.id,
            )
            raise HeadIdentityAlreadyRegisteredError(identity.head_identifier)

        logger.info(
            "Head registered: %s (%s) as %s",
            account.email,
            account.id,
            identity.head_identifier,
        )
        return account

    async def _load_claimable_identity(self, head_identifier: str) -> HeadIdentity:
        identity = await self._identity_repo.find_by_identifier(head_identifier.strip())
        if identity is None:
            raise HeadIdentityNotFoundError(head_identifier.strip())
        if identity.is_registered:
            raise HeadIdentityAlreadyRegisteredError(identity.head_identifier)
        return identity

    async def _check_email_available(self, email: Email) -> None:
        if await self._account_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email.value)

    def _check_password_policy(self, password: str) -> None:
        try:
            self._password_service.validate_strength(password)
        except WeakPasswordError as e:
            raise ValidationError(e.message, code=ErrorCode.WEAK_PASSWORD) from e
