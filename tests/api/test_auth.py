import base64
import pytest
import pyotp
from httpx import AsyncClient
from fastapi import status

from medcase.crud import user as user_crud
from medcase.db.models import UserRole
from tests.helpers import TEST_PASSWORD, auth_headers, make_user

pytestmark = pytest.mark.asyncio

@pytest.fixture
def test_user_data():
    return {
        "name": "Test User",
        "email": "test@example.com",
        "password": TEST_PASSWORD,
    }

class TestRegistration:
    async def test_first_user_becomes_admin(self, client: AsyncClient, test_db, test_user_data):
        response = await client.post("/api/v1/auth/register", json=test_user_data)
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        assert data["secret"]
        assert data["provisioning_uri"].startswith("otpauth://totp/")
        assert data["secret"] in data["provisioning_uri"]
        assert data["qr_code"].startswith("data:image/svg+xml;base64,")
        svg = base64.b64decode(data["qr_code"].split(",", 1)[1])
        assert b"http://www.w3.org/2000/svg" in svg

        user = await user_crud.get_user_by_email(test_db, "test@example.com")
        assert user.role == UserRole.ADMIN
        assert user.two_factor_enabled is True
        assert user.two_factor_secret == data["secret"]
        assert user.hashed_password != TEST_PASSWORD

    async def test_later_users_become_clients(self, client: AsyncClient, test_db, test_user_data):
        await client.post("/api/v1/auth/register", json=test_user_data)
        for i in range(2):
            response = await client.post(
                "/api/v1/auth/register",
                json={"name": f"User {i}", "email": f"user{i}@example.com", "password": TEST_PASSWORD, "role": "ADMIN"},
            )
            assert response.status_code == status.HTTP_200_OK

        for i in range(2):
            user = await user_crud.get_user_by_email(test_db, f"user{i}@example.com")
            assert user.role == UserRole.CLIENT

    async def test_secret_is_a_valid_totp_secret(self, client: AsyncClient, test_user_data):
        response = await client.post("/api/v1/auth/register", json=test_user_data)
        secret = response.json()["secret"]
        totp = pyotp.TOTP(secret)
        assert totp.verify(totp.now())

    async def test_duplicate_email_rejected(self, client: AsyncClient, test_user_data):
        await client.post("/api/v1/auth/register", json=test_user_data)
        response = await client.post("/api/v1/auth/register", json=test_user_data)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "User already exists"

    async def test_duplicate_email_rejected_when_lookup_misses(
        self, client: AsyncClient, test_user_data, monkeypatch
    ):
        # Two registrations racing past the lookup both reach the insert
        async def no_existing_user(*args, **kwargs):
            return None

        await client.post("/api/v1/auth/register", json=test_user_data)
        monkeypatch.setattr(user_crud, "get_user_by_email", no_existing_user)

        response = await client.post("/api/v1/auth/register", json=test_user_data)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "User already exists"

    async def test_missing_fields_rejected(self, client: AsyncClient):
        response = await client.post("/api/v1/auth/register", json={"email": "x@example.com"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"name", "password"} <= fields

class TestLogin:
    async def test_login_user(self, client: AsyncClient, test_user_data):
        await client.post("/api/v1/auth/register", json=test_user_data)

        response = await client.post(
            "/api/v1/auth/login",
            data={"username": test_user_data["email"], "password": test_user_data["password"]},
        )
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert "access_token" in data
        assert data["token_type"] == "bearer"

        me = await client.post(
            "/api/v1/auth/test-token",
            headers={"Authorization": f"Bearer {data['access_token']}"},
        )
        assert me.status_code == status.HTTP_200_OK
        assert me.json()["email"] == test_user_data["email"]
        assert me.json()["role"] == "ADMIN"

    async def test_unknown_email_and_wrong_password_look_the_same(self, client: AsyncClient, test_user_data):
        await client.post("/api/v1/auth/register", json=test_user_data)

        wrong_password = await client.post(
            "/api/v1/auth/login",
            data={"username": test_user_data["email"], "password": "wrongpassword"},
        )
        unknown_email = await client.post(
            "/api/v1/auth/login",
            data={"username": "nobody@example.com", "password": test_user_data["password"]},
        )
        assert wrong_password.status_code == status.HTTP_401_UNAUTHORIZED
        assert unknown_email.status_code == status.HTTP_401_UNAUTHORIZED
        assert wrong_password.json() == unknown_email.json()

    async def test_token_carries_profile_ids(self, client: AsyncClient, test_db):
        employee = await make_user(test_db, "coordinator@example.com", UserRole.EMPLOYEE)

        response = await client.post(
            "/api/v1/auth/login",
            data={"username": "coordinator@example.com", "password": TEST_PASSWORD},
        )
        token = response.json()["access_token"]
        me = await client.post("/api/v1/auth/test-token", headers={"Authorization": f"Bearer {token}"})
        data = me.json()
        assert data["role"] == "EMPLOYEE"
        assert data["employee_profile_id"] == employee.employee_profile.id
        assert data["client_profile_id"] is None

class TestSession:
    async def test_missing_token(self, client: AsyncClient):
        response = await client.get("/api/v1/cases")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["www-authenticate"] == "Bearer"

    async def test_invalid_token(self, client: AsyncClient):
        response = await client.get("/api/v1/cases", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_profile_strips_secrets(self, client: AsyncClient, test_db):
        user = await make_user(test_db, "contact@insuranceco.com", UserRole.CLIENT, company_name="Global Insurance Co.")

        response = await client.get("/api/v1/user/profile", headers=auth_headers(user))
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["email"] == "contact@insuranceco.com"
        assert data["client_profile"]["company_name"] == "Global Insurance Co."
        assert data["employee_profile"] is None
        assert "password" not in data
        assert "hashed_password" not in data
        assert "two_factor_secret" not in data
