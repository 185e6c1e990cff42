from rollcall.presentation.api.schemas.auth import (
    AccountResponse,
    AuthResponse,
    ChangePasswordRequest,
    HeadIdentityValidationResponse,
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
    ValidateHeadIdentityRequest,
)
from rollcall.presentation.api.schemas.hods import (
    CreateHeadRequest,
    ResetPasswordRequest,
    UpdateHeadRequest,
)

__all__ = [
    "AccountResponse",
    "AuthResponse",
    "ChangePasswordRequest",
    "CreateHeadRequest",
    "HeadIdentityValidationResponse",
    "LoginRequest",
    "RegisterRequest",
    "ResetPasswordRequest",
    "UpdateHeadRequest",
    "UpdateProfileRequest",
    "ValidateHeadIdentityRequest",
]
