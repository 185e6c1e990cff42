"""Pytest fixtures for API tests.

Each test runs the real application against its own SQLite file. Head
identities are seeded before the application starts, the way an
administrator provisions them with the CLI.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from rollcall.presentation.api.app import API_V1_PREFIX, create_app
from rollcall_config.settings import Settings
from rollcall_identity.domain.head_identity import HeadIdentity
from rollcall_identity.infrastructure.persistence.sqlalchemy import (
    HeadIdentityRepositorySQLAlchemy,
    build_engine,
    build_session_maker,
    create_tables,
)

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"
DEFAULT_PASSWORD = "secret1"


def seed_identities(database_url: str, *identities: HeadIdentity) -> None:
    """Provision head identities in a fresh event loop of their own."""

    async def _seed() -> None:
        engine = build_engine(database_url)
        try:
            await create_tables(engine)
            async with build_session_maker(engine)() as session:
                repository = HeadIdentityRepositorySQLAlchemy(session)
                for identity in identities:
                    await repository.add(identity)
                await session.commit()
        finally:
            await engine.dispose()

    asyncio.run(_seed())


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'rollcall-test.db'}"


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url_override=database_url,
        bcrypt_rounds=4,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def provisioned_identities(database_url) -> list[HeadIdentity]:
    identities = [
        HeadIdentity.provision("HOD_CS_001", name="Dr. Head", department="CS"),
        HeadIdentity.provision("HOD_ME_001", name="Dr. Gear", department="ME"),
    ]
    seed_identities(database_url, *identities)
    return identities


@pytest.fixture
def test_client(api_settings, provisioned_identities):
    """Create a test client; entering it runs the application lifespan."""
    with TestClient(create_app(settings=api_settings)) as client:
        yield client


def register_student(client, prefix, **overrides):
    payload = {
        "role": "student",
        "email": "a@x.com",
        "password": DEFAULT_PASSWORD,
        "name": "A",
        "roll_number": "R1",
    }
    payload.update(overrides)
    return client.post(f"{prefix}/auth/register", json=payload)


def register_head(client, prefix, **overrides):
    payload = {
        "role": "hod",
        "email": "hod@x.com",
        "password": DEFAULT_PASSWORD,
        "head_identifier": "HOD_CS_001",
        "department": "CS",
    }
    payload.update(overrides)
    return client.post(f"{prefix}/auth/register", json=payload)


def bearer(response) -> dict:
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def head_headers(test_client, api_v1_prefix) -> dict:
    """Auth headers for a head registered against HOD_CS_001."""
    response = register_head(test_client, api_v1_prefix)
    assert response.status_code == 201
    return bearer(response)


@pytest.fixture
def student_headers(test_client, api_v1_prefix) -> dict:
    """Auth headers for the student a@x.com."""
    response = register_student(test_client, api_v1_prefix)
    assert response.status_code == 201
    return bearer(response)
