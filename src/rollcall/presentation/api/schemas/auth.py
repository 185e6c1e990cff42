"""Authentication schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from rollcall_identity.domain.account import Account


class ValidateHeadIdentityRequest(BaseModel):
    """Request schema for checking a head identifier before registration."""

    head_identifier: str | None = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"head_identifier": "HOD_CS_001"}},
    )


class HeadIdentityValidationResponse(BaseModel):
    """Whether a head can still register against an identifier."""

    valid: bool
    department: str
    already_registered: bool


class RegisterRequest(BaseModel):
    """Request schema for self-registration.

    Which fields are required depends on ``role``; the registration service
    decides and answers with a validation error when one is missing.
    """

    role: str | None = Field(default="student", description="student or hod")
    email: str | None = None
    password: str | None = None
    name: str | None = None
    roll_number: str | None = Field(default=None, description="Students only")
    department: str | None = None
    head_identifier: str | None = Field(default=None, description="Heads only")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "role": "student",
                "email": "student@example.com",
                "password": "secret1",
                "name": "A Student",
                "roll_number": "R1",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for login.

    ``identifier`` is the email for students and the head identifier for
    heads.
    """

    role: str = "student"
    identifier: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "role": "hod",
                "identifier": "HOD_CS_001",
                "password": "secret1",
            },
        },
    )


class UpdateProfileRequest(BaseModel):
    """Request schema for updating the caller's profile. Empty fields are kept."""

    name: str | None = None
    email: str | None = None
    department: str | None = None


class ChangePasswordRequest(BaseModel):
    """Request schema for changing the caller's password."""

    current_password: str
    new_password: str


class AccountResponse(BaseModel):
    """Response schema for account data. Never carries a password hash."""

    id: UUID
    name: str | None
    email: str
    role: str
    head_identifier: str | None = None
    roll_number: str | None = None
    department: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            name=account.name,
            email=account.email,
            role=account.role.value,
            head_identifier=account.head_identifier,
            roll_number=account.roll_number,
            department=account.department,
            created_at=account.created_at,
        )


class AuthResponse(BaseModel):
    """Response schema for a successful registration or login."""

    account: AccountResponse
    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int
