"""Head administration schemas."""

from pydantic import BaseModel, ConfigDict


class CreateHeadRequest(BaseModel):
    """Request schema for creating a head account directly.

    Without ``head_identifier`` the next free one for the department is
    generated.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None
    department: str | None = None
    head_identifier: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Dr. Rao",
                "email": "rao@example.com",
                "password": "secret1",
                "department": "Physics",
            },
        },
    )


class UpdateHeadRequest(BaseModel):
    """Request schema for updating a head account. Empty fields are kept."""

    name: str | None = None
    email: str | None = None
    department: str | None = None


class ResetPasswordRequest(BaseModel):
    """Request schema for setting a head's new password."""

    new_password: str | None = None
