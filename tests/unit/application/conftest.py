"""Fixtures for application-layer tests over in-memory repositories."""

import pytest

from rollcall_auth import JWTService, PasswordHashingService
from rollcall_identity.application import (
    AuthenticationService,
    DepartmentLockRegistry,
    RegistrationService,
)
from tests.shared.fixtures.memory import InMemoryRepositoryFactory

TEST_SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_SECRET)


@pytest.fixture
def factory() -> InMemoryRepositoryFactory:
    return InMemoryRepositoryFactory()


@pytest.fixture
def department_locks() -> DepartmentLockRegistry:
    return DepartmentLockRegistry()


@pytest.fixture
def registration_service(factory, password_service, jwt_service) -> RegistrationService:
    return RegistrationService.from_factory(factory, password_service, jwt_service)


@pytest.fixture
def auth_service(factory, password_service, jwt_service) -> AuthenticationService:
    return AuthenticationService.from_factory(factory, password_service, jwt_service)
