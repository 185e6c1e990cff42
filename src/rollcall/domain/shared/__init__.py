from rollcall.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    IntegrityFault,
    ValidationError,
)
from rollcall.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ForbiddenError",
    "IntegrityFault",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
