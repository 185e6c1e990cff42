"""API tests for registration, login and the caller's profile."""

from datetime import timedelta
from uuid import uuid4

from rollcall_auth import JWTService
from tests.integration.api.conftest import (
    TEST_JWT_SECRET,
    bearer,
    register_head,
    register_student,
)


class TestStudentJourney:
    def test_register_login_and_me(self, test_client, api_v1_prefix):
        registered = register_student(test_client, api_v1_prefix)

        assert registered.status_code == 201
        body = registered.json()
        assert body["token_type"] == "bearer"
        assert body["expires_in"] == 7 * 24 * 60 * 60
        assert body["account"]["email"] == "a@x.com"
        assert body["account"]["role"] == "student"
        assert body["account"]["roll_number"] == "R1"
        assert "password_hash" not in body["account"]

        login = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"role": "student", "identifier": "a@x.com", "password": "secret1"},
        )
        assert login.status_code == 200

        me = test_client.get(f"{api_v1_prefix}/auth/me", headers=bearer(login))
        assert me.status_code == 200
        assert me.json()["id"] == body["account"]["id"]

    def test_missing_role_registers_student(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "b@x.com", "password": "secret1", "name": "B", "roll_number": "R2"},
        )

        assert response.status_code == 201
        assert response.json()["account"]["role"] == "student"

    def test_duplicate_email(self, test_client, api_v1_prefix):
        register_student(test_client, api_v1_prefix)

        response = register_student(test_client, api_v1_prefix, roll_number="R2")

        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"

    def test_duplicate_roll_number(self, test_client, api_v1_prefix):
        register_student(test_client, api_v1_prefix)

        response = register_student(test_client, api_v1_prefix, email="b@x.com")

        assert response.status_code == 409
        assert response.json()["code"] == "ROLL_NUMBER_ALREADY_EXISTS"

    def test_missing_roll_number(self, test_client, api_v1_prefix):
        response = register_student(test_client, api_v1_prefix, roll_number=None)

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Roll number is required for student registration",
            "code": "MISSING_FIELD",
        }

    def test_weak_password(self, test_client, api_v1_prefix):
        response = register_student(test_client, api_v1_prefix, password="12345")

        assert response.status_code == 400
        assert response.json()["code"] == "WEAK_PASSWORD"

    def test_invalid_email(self, test_client, api_v1_prefix):
        response = register_student(test_client, api_v1_prefix, email="not-an-email")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EMAIL"

    def test_invalid_role(self, test_client, api_v1_prefix):
        response = register_student(test_client, api_v1_prefix, role="admin")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ROLE"

    def test_wrong_password_and_unknown_email_look_alike(
        self,
        test_client,
        api_v1_prefix,
    ):
        register_student(test_client, api_v1_prefix)

        wrong_password = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"identifier": "a@x.com", "password": "nope-nope"},
        )
        unknown_email = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"identifier": "z@x.com", "password": "secret1"},
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["code"] == "INVALID_CREDENTIALS"


class TestHeadJourney:
    def test_validate_then_register_and_login(self, test_client, api_v1_prefix):
        validation = test_client.post(
            f"{api_v1_prefix}/auth/validate-head-identity",
            json={"head_identifier": "HOD_CS_001"},
        )
        assert validation.json() == {
            "valid": True,
            "department": "CS",
            "already_registered": False,
        }

        registered = register_head(test_client, api_v1_prefix)
        assert registered.status_code == 201
        account = registered.json()["account"]
        assert account["role"] == "hod"
        assert account["head_identifier"] == "HOD_CS_001"
        assert account["name"] == "Dr. Head"
        assert account["department"] == "CS"

        login = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"role": "hod", "identifier": "HOD_CS_001", "password": "secret1"},
        )
        assert login.status_code == 200
        assert login.json()["account"]["id"] == account["id"]

        revalidation = test_client.post(
            f"{api_v1_prefix}/auth/validate-head-identity",
            json={"head_identifier": "HOD_CS_001"},
        )
        assert revalidation.status_code == 200
        assert revalidation.json()["valid"] is False
        assert revalidation.json()["already_registered"] is True

    def test_validate_unknown_identifier(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/validate-head-identity",
            json={"head_identifier": "HOD_XX_001"},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "HEAD_IDENTITY_NOT_FOUND"

    def test_identity_registers_once(self, test_client, api_v1_prefix):
        register_head(test_client, api_v1_prefix)

        response = register_head(test_client, api_v1_prefix, email="other@x.com")

        assert response.status_code == 409
        assert response.json()["code"] == "HEAD_IDENTITY_ALREADY_REGISTERED"

    def test_department_mismatch(self, test_client, api_v1_prefix):
        response = register_head(test_client, api_v1_prefix, department="ME")

        assert response.status_code == 409
        assert response.json()["code"] == "DEPARTMENT_MISMATCH"

    def test_email_taken_keeps_identity_free(self, test_client, api_v1_prefix):
        register_student(test_client, api_v1_prefix, email="hod@x.com")

        response = register_head(test_client, api_v1_prefix)
        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"

        retry = register_head(test_client, api_v1_prefix, email="free@x.com")
        assert retry.status_code == 201


class TestProfile:
    def test_update_profile(self, test_client, api_v1_prefix, student_headers):
        response = test_client.put(
            f"{api_v1_prefix}/auth/profile",
            json={"name": "Renamed", "email": "", "department": "Physics"},
            headers=student_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        assert response.json()["email"] == "a@x.com"
        assert response.json()["department"] == "Physics"

    def test_change_password(self, test_client, api_v1_prefix, student_headers):
        response = test_client.put(
            f"{api_v1_prefix}/auth/change-password",
            json={"current_password": "secret1", "new_password": "secret2"},
            headers=student_headers,
        )
        assert response.status_code == 204

        old = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"identifier": "a@x.com", "password": "secret1"},
        )
        new = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"identifier": "a@x.com", "password": "secret2"},
        )
        assert old.status_code == 401
        assert new.status_code == 200

    def test_change_password_wrong_current(
        self,
        test_client,
        api_v1_prefix,
        student_headers,
    ):
        response = test_client.put(
            f"{api_v1_prefix}/auth/change-password",
            json={"current_password": "wrong-one", "new_password": "secret2"},
            headers=student_headers,
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Current password is incorrect"


class TestBearerTokens:
    def test_missing_token(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/auth/me")

        assert response.status_code == 401
        assert response.json()["code"] == "AUTHENTICATION_REQUIRED"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_invalid_token(self, test_client, api_v1_prefix):
        response = test_client.get(
            f"{api_v1_prefix}/auth/me",
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_INVALID"

    def test_expired_token(self, test_client, api_v1_prefix, student_headers):
        me = test_client.get(f"{api_v1_prefix}/auth/me", headers=student_headers)
        token = JWTService(secret_key=TEST_JWT_SECRET).create_access_token(
            me.json()["id"],
            "student",
            expires_delta=timedelta(minutes=-1),
        )

        response = test_client.get(
            f"{api_v1_prefix}/auth/me",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_EXPIRED"

    def test_token_for_unknown_account(self, test_client, api_v1_prefix):
        token = JWTService(secret_key=TEST_JWT_SECRET).create_access_token(
            uuid4(),
            "student",
        )

        response = test_client.get(
            f"{api_v1_prefix}/auth/me",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "ACCOUNT_NOT_FOUND"


class TestRequestValidation:
    def test_malformed_login_body_is_400(self, test_client, api_v1_prefix):
        response = test_client.post(f"{api_v1_prefix}/auth/login", json={"password": 1})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestServiceEndpoints:
    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, test_client, api_v1_prefix):
        response = test_client.get("/")

        assert response.json()["api_base"] == api_v1_prefix
