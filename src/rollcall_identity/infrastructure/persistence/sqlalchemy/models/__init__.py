from rollcall_identity.infrastructure.persistence.sqlalchemy.models.account_model import (  # NOQA: E501
    AccountModel,
)
from rollcall_identity.infrastructure.persistence.sqlalchemy.models.head_identity_model import (  # NOQA: E501
    HeadIdentityModel,
)

__all__ = ["AccountModel", "HeadIdentityModel"]
