from rollcall_identity.infrastructure.persistence.sqlalchemy.repositories.account_repository import (  # NOQA: E501
    AccountRepositorySQLAlchemy,
)
from rollcall_identity.infrastructure.persistence.sqlalchemy.repositories.factory import (  # NOQA: E501
    SQLAlchemyRepositoryFactory,
)
from rollcall_identity.infrastructure.persistence.sqlalchemy.repositories.head_identity_repository import (  # NOQA: E501
    HeadIdentityRepositorySQLAlchemy,
)

__all__ = [
    "AccountRepositorySQLAlchemy",
    "HeadIdentityRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
]
