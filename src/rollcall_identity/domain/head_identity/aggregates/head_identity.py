"""HeadIdentity aggregate: a pre-provisioned department-head slot."""

from datetime import datetime
from uuid import UUID

from rollcall.domain.shared.exceptions import IntegrityFault, ValidationError
from rollcall.domain.shared.time import utc_now


class HeadIdentity:
    """
    Department-head identity seeded by an administrator.

    A head can only self-register against an existing, unclaimed identity.
    Registration stores the password hash on the identity and links it to
    the account created for the head. Once registered, an identity is never
    released again.

    The aggregate is read-only. Registration and password changes are
    conditional writes in ``HeadIdentityRepository`` (``claim`` and
    ``update_password_hash``).
    """

    def __init__(  # NOQA: PLR0913
        self,
        head_identifier: str,
        name: str,
        department: str,
        password_hash: str | None = None,
        is_registered: bool = False,
        linked_account_id: UUID | None = None,
        created_at: datetime | None = None,
    ):
        head_identifier = (head_identifier or "").strip()
        if not head_identifier:
            msg = "Head identifier cannot be empty"
            raise ValidationError(msg)

        self._head_identifier = head_identifier
        self._name = name
        self._department = department
        self._password_hash = password_hash
        self._is_registered = is_registered
        self._linked_account_id = linked_account_id
        self._created_at = created_at or utc_now()
        self._check_registration_state()

    def _check_registration_state(self) -> None:
        claimed = (
            self._is_registered,
            self._linked_account_id is not None,
            self._password_hash is not None,
        )
        if any(claimed) and not all(claimed):
            msg = f"Head identity {self._head_identifier} is partially registered"
            raise IntegrityFault(
                msg,
                details={
                    "head_identifier": self._head_identifier,
                    "is_registered": self._is_registered,
                    "has_link": self._linked_account_id is not None,
                    "has_password": self._password_hash is not None,
                },
            )

    @property
    def head_identifier(self) -> str:
        return self._head_identifier

    @property
    def name(self) -> str:
        return self._name

    @property
    def department(self) -> str:
        return self._department

    @property
    def password_hash(self) -> str | None:
        return self._password_hash

    @property
    def is_registered(self) -> bool:
        return self._is_registered

    @property
    def linked_account_id(self) -> UUID | None:
        return self._linked_account_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def matches_department(self, department: str | None) -> bool:
        """Exact, whitespace-trimmed comparison."""
        return (department or "").strip() == (self._department or "").strip()

    @classmethod
    def provision(cls, head_identifier: str, name: str, department: str) -> "HeadIdentity":
        return cls(head_identifier=head_identifier, name=name, department=department)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        head_identifier: str,
        name: str,
        department: str,
        password_hash: str | None,
        is_registered: bool,
        linked_account_id: UUID | None,
        created_at: datetime,
    ) -> "HeadIdentity":
        return cls(
            head_identifier=head_identifier,
            name=name,
            department=department,
            password_hash=password_hash,
            is_registered=is_registered,
            linked_account_id=linked_account_id,
            created_at=created_at,
        )

    def __repr__(self) -> str:
        return (
            f"HeadIdentity(head_identifier={self._head_identifier}, "
            f"registered={self._is_registered})"
        )
