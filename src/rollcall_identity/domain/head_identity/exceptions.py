"""Department-head identity exceptions."""

from rollcall.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class HeadIdentityNotFoundError(EntityNotFoundError):
    """No pre-provisioned identity exists for the identifier."""

    def __init__(self, head_identifier: str) -> None:
        self.head_identifier = head_identifier
        super().__init__(
            "Invalid HOD ID. Please contact the administrator",
            code=ErrorCode.HEAD_IDENTITY_NOT_FOUND,
            details={"head_identifier": head_identifier},
        )


class HeadIdentityAlreadyRegisteredError(ConflictError):
    """The identity has already been claimed by an account."""

    def __init__(self, head_identifier: str) -> None:
        self.head_identifier = head_identifier
        super().__init__(
            "This HOD ID is already registered. Please login instead",
            code=ErrorCode.HEAD_IDENTITY_ALREADY_REGISTERED,
            details={"head_identifier": head_identifier},
        )


class DepartmentMismatchError(ConflictError):
    """The supplied department differs from the pre-provisioned one."""

    def __init__(self, head_identifier: str, department: str) -> None:
        self.head_identifier = head_identifier
        self.department = department
        super().__init__(
            "HOD ID and Department do not match. Please check your details",
            code=ErrorCode.DEPARTMENT_MISMATCH,
            details={"head_identifier": head_identifier, "department": department},
        )


class HeadIdentityAlreadyExistsError(ConflictError):
    """An identity with this head identifier has already been provisioned."""

    def __init__(self, head_identifier: str) -> None:
        self.head_identifier = head_identifier
        super().__init__(
            f"Head identity already provisioned: {head_identifier}",
            details={"head_identifier": head_identifier},
        )
