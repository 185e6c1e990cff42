"""Async engine, session maker and schema management."""

import logging
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Import models to register with Base.metadata
import rollcall_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from rollcall_identity.infrastructure.persistence.sqlalchemy.base import Base

logger = logging.getLogger(__name__)


def _is_memory_sqlite(database_url: str) -> bool:
    return ":memory:" in database_url or database_url.rstrip("/").endswith(":")


def _enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """Let SQLAlchemy own BEGIN so SAVEPOINT works with pysqlite/aiosqlite."""

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for a database URL.

    SQLite URLs get the savepoint workaround; an in-memory database is
    pinned to a single connection so every session sees the same data.

    Parameters
    ----------
    database_url
        SQLAlchemy URL (``postgresql+asyncpg://...`` or ``sqlite+aiosqlite://...``)
    echo
        Log every statement

    Returns
    -------
    AsyncEngine instance
    """
    if not database_url.startswith("sqlite"):
        return create_async_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,  # Verify connections before use
        )

    if _is_memory_sqlite(database_url):
        engine = create_async_engine(
            database_url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        # Ensure data directory exists for SQLite
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        engine = create_async_engine(database_url, echo=echo)

    _enable_sqlite_savepoints(engine)
    return engine


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")
