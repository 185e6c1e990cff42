"""Tests for student and head self-registration."""

import asyncio
from unittest.mock import patch

import pytest

from rollcall.domain.shared.exceptions import ErrorCode, ValidationError
from rollcall_identity.application import (
    HeadRegistration,
    StudentRegistration,
    registration_from_fields,
)
from rollcall_identity.domain.account import (
    AccountRole,
    EmailAlreadyExistsError,
    RollNumberAlreadyExistsError,
)
from rollcall_identity.domain.head_identity import (
    DepartmentMismatchError,
    HeadIdentityAlreadyRegisteredError,
    HeadIdentityNotFoundError,
)
from tests.shared.fixtures.factories import make_identity, make_student


def _student(**overrides) -> StudentRegistration:
    fields = {"email": "a@x.com", "password": "secret1", "name": "A", "roll_number": "R1"}
    fields.update(overrides)
    return StudentRegistration(**fields)


def _head(**overrides) -> HeadRegistration:
    fields = {
        "email": "hod@x.com",
        "password": "secret1",
        "head_identifier": "HOD_CS_001",
        "department": "CS",
    }
    fields.update(overrides)
    return HeadRegistration(**fields)


class TestRegistrationFromFields:
    def test_missing_role_means_student(self):
        registration = registration_from_fields(
            role=None, email="a@x.com", password="secret1", name="A", roll_number="R1",
        )

        assert isinstance(registration, StudentRegistration)

    def test_head_spelling_builds_head_registration(self):
        registration = registration_from_fields(
            role="head",
            email="h@x.com",
            password="secret1",
            department="CS",
            head_identifier=" HOD_CS_001 ",
        )

        assert isinstance(registration, HeadRegistration)
        assert registration.head_identifier == "HOD_CS_001"

    def test_missing_email_or_password(self):
        with pytest.raises(ValidationError) as exc_info:
            registration_from_fields(role="student", email="", password="secret1")

        assert exc_info.value.code == ErrorCode.MISSING_FIELD

    def test_unknown_role(self):
        with pytest.raises(ValidationError) as exc_info:
            registration_from_fields(role="admin", email="a@x.com", password="secret1")

        assert exc_info.value.code == ErrorCode.INVALID_ROLE

    def test_student_needs_roll_number(self):
        with pytest.raises(ValidationError, match="Roll number is required"):
            registration_from_fields(
                role="student", email="a@x.com", password="secret1", name="A",
            )

    def test_head_needs_department_before_identifier(self):
        with pytest.raises(ValidationError, match="Department is required"):
            registration_from_fields(role="hod", email="h@x.com", password="secret1")


class TestStudentRegistration:
    @pytest.mark.asyncio
    async def test_register_student(self, registration_service, jwt_service, factory):
        result = await registration_service.register(_student())

        assert result.account.is_student
        assert result.account.email == "a@x.com"
        assert result.account.roll_number == "R1"
        assert result.account.password_hash != "secret1"
        assert jwt_service.verify_token(result.access_token).account_id == result.account.id
        assert result.account.id in factory.accounts.accounts

    @pytest.mark.asyncio
    async def test_weak_password_is_checked_first(self, registration_service, factory):
        await factory.accounts.add(make_student(email="a@x.com"))

        with pytest.raises(ValidationError) as exc_info:
            await registration_service.register(_student(password="123"))

        assert exc_info.value.code == ErrorCode.WEAK_PASSWORD

    @pytest.mark.asyncio
    async def test_duplicate_email(self, registration_service, factory):
        await factory.accounts.add(make_student(email="a@x.com", roll_number="R9"))

        with pytest.raises(EmailAlreadyExistsError):
            await registration_service.register(_student(email="A@X.com"))

    @pytest.mark.asyncio
    async def test_email_checked_before_roll_number(self, registration_service, factory):
        await factory.accounts.add(make_student(email="a@x.com", roll_number="R1"))

        with pytest.raises(EmailAlreadyExistsError):
            await registration_service.register(_student())

    @pytest.mark.asyncio
    async def test_duplicate_roll_number(self, registration_service, factory):
        await factory.accounts.add(make_student(email="b@x.com", roll_number="R1"))

        with pytest.raises(RollNumberAlreadyExistsError):
            await registration_service.register(_student())

        assert len(factory.accounts.accounts) == 1


class TestHeadRegistration:
    @pytest.mark.asyncio
    async def test_register_head_claims_identity(self, registration_service, factory):
        await factory.identities.add(make_identity(name="Dr. Head", department="CS"))

        result = await registration_service.register(_head(name="Ignored"))

        account = result.account
        identity = factory.identities.identities["HOD_CS_001"]
        assert account.role == AccountRole.HEAD
        assert account.head_identifier == "HOD_CS_001"
        assert account.name == "Dr. Head"
        assert account.department == "CS"
        assert identity.is_registered
        assert identity.linked_account_id == account.id
        # One digest shared by identity and account
        assert identity.password_hash == account.password_hash

    @pytest.mark.asyncio
    async def test_unknown_identity(self, registration_service):
        with pytest.raises(HeadIdentityNotFoundError):
            await registration_service.register(_head())

    @pytest.mark.asyncio
    async def test_already_registered_identity(self, registration_service, factory):
        await factory.identities.add(make_identity())
        await registration_service.register(_head())

        with pytest.raises(HeadIdentityAlreadyRegisteredError):
            await registration_service.register(_head(email="other@x.com"))

    @pytest.mark.asyncio
    async def test_department_mismatch(self, registration_service, factory):
        await factory.identities.add(make_identity(department="CS"))

        with pytest.raises(DepartmentMismatchError):
            await registration_service.register(_head(department="Computer Science"))

        assert not factory.identities.identities["HOD_CS_001"].is_registered

    @pytest.mark.asyncio
    async def test_email_taken_leaves_identity_unclaimed(
        self,
        registration_service,
        factory,
    ):
        await factory.identities.add(make_identity())
        await factory.accounts.add(make_student(email="hod@x.com"))

        with pytest.raises(EmailAlreadyExistsError):
            await registration_service.register(_head())

        assert not factory.identities.identities["HOD_CS_001"].is_registered

    @pytest.mark.asyncio
    async def test_concurrent_claims_admit_one_account(
        self,
        registration_service,
        factory,
    ):
        await factory.identities.add(make_identity())

        results = await asyncio.gather(
            registration_service.register(_head(email="one@x.com")),
            registration_service.register(_head(email="two@x.com")),
            return_exceptions=True,
        )

        successes = [r for r in results if not isinstance(r, Exception)]
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(successes) == 1
        assert len(failures) == 1
        assert isinstance(failures[0], HeadIdentityAlreadyRegisteredError)
        heads = [a for a in factory.accounts.accounts.values() if a.is_head]
        assert heads == [successes[0].account]
        identity = factory.identities.identities["HOD_CS_001"]
        assert identity.linked_account_id == successes[0].account.id

    @pytest.mark.asyncio
    async def test_password_hashed_once(self, registration_service, factory, password_service):
        await factory.identities.add(make_identity())

        with patch.object(
            password_service,
            "hash",
            wraps=password_service.hash,
        ) as hash_spy:
            await registration_service.register(_head())

        hash_spy.assert_called_once_with("secret1")

    @pytest.mark.asyncio
    async def test_lost_claim_removes_the_new_account(self, registration_service, factory):
        await factory.identities.add(make_identity())

        with patch.object(factory.identities, "claim", return_value=False):
            with pytest.raises(HeadIdentityAlreadyRegisteredError):
                await registration_service.register(_head())

        assert factory.accounts.accounts == {}
