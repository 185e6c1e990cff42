"""Account aggregate: one principal that can log in."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from rollcall.domain.shared.exceptions import ErrorCode, ValidationError
from rollcall.domain.shared.time import utc_now
from rollcall_identity.domain.account.value_objects import AccountRole, Email


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class Account:
    """
    Account aggregate root.

    A student or a department head. The role is fixed at creation; a head
    always carries a head identifier and a student never does.

    The password hash is held here so the aggregate can be persisted as one
    record, but it is never exposed by any outward schema.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        role: Union[str, AccountRole],
        password_hash: str,
        name: str | None = None,
        head_identifier: str | None = None,
        roll_number: str | None = None,
        department: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._role = role if isinstance(role, AccountRole) else AccountRole(role)
        self._password_hash = password_hash
        self._name = _clean(name)
        self._head_identifier = _clean(head_identifier)
        self._roll_number = _clean(roll_number)
        self._department = _clean(department)
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()
        self._check_role_invariants()

    def _check_role_invariants(self) -> None:
        if not self._password_hash:
            msg = "Password hash is required"
            raise ValidationError(msg)

        if self._role == AccountRole.HEAD:
            if self._head_identifier is None:
                msg = "Head accounts require a head identifier"
                raise ValidationError(msg, code=ErrorCode.MISSING_FIELD)
            if self._roll_number is not None:
                msg = "Head accounts cannot carry a roll number"
                raise ValidationError(msg)
        else:
            if self._head_identifier is not None:
                msg = "Only head accounts can carry a head identifier"
                raise ValidationError(msg)
            if self._name is None:
                msg = "Please provide your name"
                raise ValidationError(msg, code=ErrorCode.MISSING_FIELD)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def owner_id(self) -> UUID:
        """An account record is owned by the account itself."""
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def role(self) -> AccountRole:
        return self._role

    @property
    def is_head(self) -> bool:
        return self._role == AccountRole.HEAD

    @property
    def is_student(self) -> bool:
        return self._role == AccountRole.STUDENT

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def head_identifier(self) -> str | None:
        return self._head_identifier

    @property
    def roll_number(self) -> str | None:
        return self._roll_number

    @property
    def department(self) -> str | None:
        return self._department

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(
        self,
        name: str | None = None,
        email: Union[str, Email, None] = None,
        department: str | None = None,
    ) -> None:
        """Apply the non-empty fields; empty values leave a field untouched."""
        if _clean(name) is not None:
            self._name = _clean(name)
        if email:
            self._email = email if isinstance(email, Email) else Email(email)
        if _clean(department) is not None:
            self._department = _clean(department)
        self._updated_at = utc_now()

    def change_password_hash(self, password_hash: str) -> None:
        """Store an already computed digest. Never hashes again."""
        if not password_hash:
            msg = "Password hash is required"
            raise ValidationError(msg)
        self._password_hash = password_hash
        self._updated_at = utc_now()

    @classmethod
    def create_student(
        cls,
        email: Union[str, Email],
        password_hash: str,
        name: str,
        roll_number: str | None = None,
        department: str | None = None,
    ) -> "Account":
        return cls(
            email=email,
            role=AccountRole.STUDENT,
            password_hash=password_hash,
            name=name,
            roll_number=roll_number,
            department=department,
        )

    @classmethod
    def create_head(
        cls,
        email: Union[str, Email],
        password_hash: str,
        head_identifier: str,
        name: str | None = None,
        department: str | None = None,
    ) -> "Account":
        return cls(
            email=email,
            role=AccountRole.HEAD,
            password_hash=password_hash,
            name=name,
            head_identifier=head_identifier,
            department=department,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        role: Union[str, AccountRole],
        password_hash: str,
        name: str | None,
        head_identifier: str | None,
        roll_number: str | None,
        department: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Account":
        return cls(
            id=id,
            email=email,
            role=role,
            password_hash=password_hash,
            name=name,
            head_identifier=head_identifier,
            roll_number=roll_number,
            department=department,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Account(id={self._id}, email={self._email.value}, "
            f"role={self._role.value})"
        )
