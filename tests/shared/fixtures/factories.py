"""Builders for domain objects used across test modules."""

from uuid import UUID, uuid4

from rollcall_identity.domain.account import Account
from rollcall_identity.domain.head_identity import HeadIdentity

# Any non-empty string satisfies the aggregate; services never re-hash it
FAKE_HASH = "$2b$04$fakehashfakehashfakehauJ0TlM7eWc3c1Ao0zqzqV6D2m3h6y"


def make_student(
    email: str = "a@x.com",
    name: str = "A",
    roll_number: str | None = "R1",
    department: str | None = None,
    password_hash: str = FAKE_HASH,
) -> Account:
    return Account.create_student(
        email=email,
        password_hash=password_hash,
        name=name,
        roll_number=roll_number,
        department=department,
    )


def make_head(
    email: str = "hod@x.com",
    head_identifier: str = "HOD_CS_001",
    name: str | None = "Dr. Head",
    department: str | None = "CS",
    password_hash: str = FAKE_HASH,
) -> Account:
    return Account.create_head(
        email=email,
        password_hash=password_hash,
        head_identifier=head_identifier,
        name=name,
        department=department,
    )


def make_identity(
    head_identifier: str = "HOD_CS_001",
    name: str = "Dr. Head",
    department: str = "CS",
) -> HeadIdentity:
    return HeadIdentity.provision(
        head_identifier=head_identifier,
        name=name,
        department=department,
    )


def make_registered_identity(
    account_id: UUID | None = None,
    head_identifier: str = "HOD_CS_001",
    password_hash: str = FAKE_HASH,
    department: str = "CS",
) -> HeadIdentity:
    return HeadIdentity(
        head_identifier=head_identifier,
        name="Dr. Head",
        department=department,
        password_hash=password_hash,
        is_registered=True,
        linked_account_id=account_id or uuid4(),
    )
