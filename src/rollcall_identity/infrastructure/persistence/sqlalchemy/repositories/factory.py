"""SQLAlchemy repository factory bound to one session."""

from sqlalchemy.ext.asyncio import AsyncSession

from rollcall_identity.infrastructure.persistence.sqlalchemy.repositories.account_repository import (  # NOQA: E501
    AccountRepositorySQLAlchemy,
)
from rollcall_identity.infrastructure.persistence.sqlalchemy.repositories.head_identity_repository import (  # NOQA: E501
    HeadIdentityRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._account_repo: AccountRepositorySQLAlchemy | None = None
        self._identity_repo: HeadIdentityRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def account_repository(self) -> AccountRepositorySQLAlchemy:
        if self._account_repo is None:
            self._account_repo = AccountRepositorySQLAlchemy(self._session)
        return self._account_repo

    def head_identity_repository(self) -> HeadIdentityRepositorySQLAlchemy:
        if self._identity_repo is None:
            self._identity_repo = HeadIdentityRepositorySQLAlchemy(self._session)
        return self._identity_repo
