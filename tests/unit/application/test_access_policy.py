"""Tests for role and ownership gates."""

from dataclasses import dataclass
from uuid import UUID, uuid4

import pytest

from rollcall.domain.shared.exceptions import ErrorCode, ForbiddenError
from rollcall_auth import AuthenticationRequiredError
from rollcall_identity.application import AccessPolicy, ResourceNotFoundError
from rollcall_identity.domain.account import AccountRole
from tests.shared.fixtures.factories import make_head, make_student


@dataclass
class AttendanceRecord:
    id: UUID
    owner_id: UUID


class TestAuthorize:
    def test_allowed_role(self):
        head = make_head()

        assert AccessPolicy.authorize(head, AccountRole.HEAD) is head

    def test_any_of_several_roles(self):
        student = make_student()

        assert AccessPolicy.authorize(student, "hod", "student") is student

    def test_disallowed_role(self):
        with pytest.raises(ForbiddenError) as exc_info:
            AccessPolicy.authorize(make_student(), AccountRole.HEAD)

        assert exc_info.value.code == ErrorCode.ROLE_NOT_ALLOWED
        assert exc_info.value.message == "Access denied. Requires role: hod"

    def test_no_account(self):
        with pytest.raises(AuthenticationRequiredError):
            AccessPolicy.authorize(None, AccountRole.STUDENT)


class TestVerifyOwnership:
    def setup_method(self):
        self.student = make_student()
        self.record = AttendanceRecord(id=uuid4(), owner_id=self.student.id)
        self.records = {self.record.id: self.record}

    async def lookup(self, record_id):
        return self.records.get(record_id)

    @pytest.mark.asyncio
    async def test_owner_gets_resource(self):
        resource = await AccessPolicy.verify_ownership(
            self.student, self.record.id, self.lookup,
        )

        assert resource is self.record

    @pytest.mark.asyncio
    async def test_head_bypasses_ownership(self):
        resource = await AccessPolicy.verify_ownership(
            make_head(), self.record.id, self.lookup,
        )

        assert resource is self.record

    @pytest.mark.asyncio
    async def test_other_student_is_forbidden(self):
        other = make_student(email="b@x.com", roll_number="R2")

        with pytest.raises(ForbiddenError) as exc_info:
            await AccessPolicy.verify_ownership(other, self.record.id, self.lookup)

        assert exc_info.value.code == ErrorCode.NOT_RESOURCE_OWNER

    @pytest.mark.asyncio
    async def test_missing_resource(self):
        with pytest.raises(ResourceNotFoundError) as exc_info:
            await AccessPolicy.verify_ownership(self.student, uuid4(), self.lookup)

        assert exc_info.value.message == "Item not found"

    @pytest.mark.asyncio
    async def test_missing_resource_reported_before_ownership(self):
        other = make_student(email="b@x.com", roll_number="R2")

        with pytest.raises(ResourceNotFoundError):
            await AccessPolicy.verify_ownership(other, uuid4(), self.lookup)

    @pytest.mark.asyncio
    async def test_no_account(self):
        with pytest.raises(AuthenticationRequiredError):
            await AccessPolicy.verify_ownership(None, self.record.id, self.lookup)
