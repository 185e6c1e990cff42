"""Unit tests for the Account aggregate and its value objects."""

from uuid import uuid4

import pytest

from rollcall.domain.shared.exceptions import ErrorCode, ValidationError
from rollcall_identity.domain.account import (
    Account,
    AccountRole,
    Email,
    InvalidEmailError,
)
from tests.shared.fixtures.factories import FAKE_HASH, make_head, make_student


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  A@X.COM ").value == "a@x.com"

    def test_equal_after_normalization(self):
        assert Email("A@x.com") == Email("a@X.com")

    @pytest.mark.parametrize("raw", ["", "plain", "a@x", "@x.com", "a b@x.com"])
    def test_invalid_addresses_raise(self, raw):
        with pytest.raises(InvalidEmailError) as exc_info:
            Email(raw)

        assert exc_info.value.code == ErrorCode.INVALID_EMAIL


class TestAccountRole:
    def test_head_wire_value_is_hod(self):
        assert AccountRole.HEAD.value == "hod"

    @pytest.mark.parametrize("raw", ["hod", "HOD", "head", " Head "])
    def test_head_spellings(self, raw):
        assert AccountRole(raw) is AccountRole.HEAD

    def test_unknown_role_raises(self):
        with pytest.raises(ValueError):
            AccountRole("admin")


class TestStudentAccount:
    def test_create_student(self):
        account = make_student(email="A@X.com", name=" A ", roll_number="R1")

        assert account.is_student
        assert not account.is_head
        assert account.email == "a@x.com"
        assert account.name == "A"
        assert account.roll_number == "R1"
        assert account.head_identifier is None
        assert account.owner_id == account.id

    def test_student_requires_name(self):
        with pytest.raises(ValidationError) as exc_info:
            make_student(name="   ")

        assert exc_info.value.code == ErrorCode.MISSING_FIELD

    def test_student_cannot_carry_head_identifier(self):
        with pytest.raises(ValidationError):
            Account(
                email="a@x.com",
                role=AccountRole.STUDENT,
                password_hash=FAKE_HASH,
                name="A",
                head_identifier="HOD_CS_001",
            )

    def test_password_hash_is_required(self):
        with pytest.raises(ValidationError, match="Password hash"):
            make_student(password_hash="")


class TestHeadAccount:
    def test_create_head(self):
        account = make_head(head_identifier=" HOD_CS_001 ")

        assert account.is_head
        assert account.role == AccountRole.HEAD
        assert account.head_identifier == "HOD_CS_001"
        assert account.roll_number is None

    def test_head_requires_identifier(self):
        with pytest.raises(ValidationError) as exc_info:
            make_head(head_identifier="")

        assert exc_info.value.code == ErrorCode.MISSING_FIELD

    def test_head_cannot_carry_roll_number(self):
        with pytest.raises(ValidationError, match="roll number"):
            Account(
                email="h@x.com",
                role="hod",
                password_hash=FAKE_HASH,
                head_identifier="HOD_CS_001",
                roll_number="R1",
            )

    def test_head_name_is_optional(self):
        assert make_head(name=None).name is None


class TestAccountBehavior:
    def test_update_profile_applies_only_non_empty_fields(self):
        account = make_student(department="CS")

        account.update_profile(name="", email="new@x.com", department=None)

        assert account.name == "A"
        assert account.email == "new@x.com"
        assert account.department == "CS"

    def test_update_profile_changes_name_and_department(self):
        account = make_student()

        account.update_profile(name=" B ", department=" Physics ")

        assert account.name == "B"
        assert account.department == "Physics"

    def test_change_password_hash_stores_digest_as_is(self):
        account = make_student()
        before = account.updated_at

        account.change_password_hash("$2b$04$other")

        assert account.password_hash == "$2b$04$other"
        assert account.updated_at >= before

    def test_equality_is_by_id(self):
        account_id = uuid4()
        first = Account(
            email="a@x.com", role="student", password_hash=FAKE_HASH, name="A",
            id=account_id,
        )
        second = Account(
            email="b@x.com", role="student", password_hash=FAKE_HASH, name="B",
            id=account_id,
        )

        assert first == second
        assert hash(first) == hash(second)
        assert first != make_student()
