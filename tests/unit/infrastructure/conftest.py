"""Fixtures for repository tests against an in-memory SQLite database."""

import pytest

from rollcall_identity.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyRepositoryFactory,
    build_engine,
    build_session_maker,
    create_tables,
)


@pytest.fixture
async def sqlite_engine():
    engine = build_engine("sqlite+aiosqlite://")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(sqlite_engine):
    async with build_session_maker(sqlite_engine)() as session:
        yield session
        await session.rollback()


@pytest.fixture
def repo_factory(db_session) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(db_session)
