"""Fixtures for PostgreSQL repository tests."""

from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    db_session,
    postgres_container,
    session_maker,
)
