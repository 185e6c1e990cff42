"""SQLAlchemy implementation for rollcall_identity persistence.

Provides:
- Base: Declarative base for identity models
- AccountModel, HeadIdentityModel: table mappings
- AccountRepositorySQLAlchemy, HeadIdentityRepositorySQLAlchemy: repositories
- SQLAlchemyRepositoryFactory: per-session repository access
- build_engine / build_session_maker / create_tables / drop_tables
"""

from rollcall_identity.infrastructure.persistence.sqlalchemy.base import Base
from rollcall_identity.infrastructure.persistence.sqlalchemy.engine import (
    build_engine,
    build_session_maker,
    create_tables,
    drop_tables,
)
from rollcall_identity.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
    HeadIdentityModel,
)
from rollcall_identity.infrastructure.persistence.sqlalchemy.repositories import (
    AccountRepositorySQLAlchemy,
    HeadIdentityRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
)

__all__ = [
    "AccountModel",
    "AccountRepositorySQLAlchemy",
    "Base",
    "HeadIdentityModel",
    "HeadIdentityRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "build_engine",
    "build_session_maker",
    "create_tables",
    "drop_tables",
]
