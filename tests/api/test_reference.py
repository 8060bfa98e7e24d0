import pytest
from httpx import AsyncClient
from fastapi import status

from medcase.db.models import CaseType, CertificationType, UserRole
from tests.helpers import TEST_PASSWORD, auth_headers, make_user

pytestmark = pytest.mark.asyncio

class TestReferenceData:
    async def test_case_types_active_only(self, client: AsyncClient, test_db, world):
        test_db.add(CaseType(name="Retired Service", is_active=False))
        test_db.add(CaseType(name="Medical Evacuation", description="International medical evacuation"))
        await test_db.commit()

        response = await client.get("/api/v1/case-types", headers=auth_headers(world.client_user))
        assert response.status_code == status.HTTP_200_OK
        assert [item["name"] for item in response.json()] == ["Emergency Transport", "Medical Evacuation"]

    async def test_case_types_require_authentication(self, client: AsyncClient, world):
        response = await client.get("/api/v1/case-types")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_admin_creates_case_type(self, client: AsyncClient, world):
        body = {"name": "Medical Repatriation", "description": "Return transport to home country"}
        response = await client.post("/api/v1/case-types", json=body, headers=auth_headers(world.admin))
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["name"] == "Medical Repatriation"

        duplicate = await client.post("/api/v1/case-types", json=body, headers=auth_headers(world.admin))
        assert duplicate.status_code == status.HTTP_400_BAD_REQUEST

    async def test_non_admin_cannot_create_case_type(self, client: AsyncClient, world):
        for user in (world.employee, world.client_user):
            response = await client.post(
                "/api/v1/case-types", json={"name": "Sneaky"}, headers=auth_headers(user)
            )
            assert response.status_code == status.HTTP_403_FORBIDDEN

    async def test_certification_types(self, client: AsyncClient, test_db, world):
        test_db.add(CertificationType(name="Old Cert", is_active=False))
        await test_db.commit()

        response = await client.post(
            "/api/v1/certification-types",
            json={"name": "ACLS", "description": "Advanced cardiac life support"},
            headers=auth_headers(world.admin),
        )
        assert response.status_code == status.HTTP_201_CREATED

        response = await client.get("/api/v1/certification-types", headers=auth_headers(world.employee))
        assert [item["name"] for item in response.json()] == ["ACLS"]

    async def test_clients_listing_skips_inactive_accounts(self, client: AsyncClient, test_db, world):
        world.other_client_user.is_active = False
        test_db.add(world.other_client_user)
        await test_db.commit()

        response = await client.get("/api/v1/clients", headers=auth_headers(world.employee))
        assert response.status_code == status.HTTP_200_OK
        assert [item["company_name"] for item in response.json()] == ["Global Insurance Co."]

    async def test_employees_listing(self, client: AsyncClient, world):
        response = await client.get("/api/v1/employees", headers=auth_headers(world.client_user))
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [item["name"] for item in data] == ["Anna White", "Michael Brown"]
        assert data[1]["employee_profile"]["id"] == world.employee.employee_profile.id

class TestUserManagement:
    async def test_admin_provisions_employee(self, client: AsyncClient, world):
        body = {
            "name": "Dr. Lee",
            "email": "lee@example.com",
            "password": TEST_PASSWORD,
            "role": "EMPLOYEE",
            "employee_profile": {"department": "Medical", "position": "Flight Physician"},
        }
        response = await client.post("/api/v1/users", json=body, headers=auth_headers(world.admin))
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["role"] == "EMPLOYEE"
        assert data["employee_profile"]["position"] == "Flight Physician"
        assert "hashed_password" not in data

        login = await client.post(
            "/api/v1/auth/login", data={"username": "lee@example.com", "password": TEST_PASSWORD}
        )
        assert login.status_code == status.HTTP_200_OK

    async def test_profile_must_match_role(self, client: AsyncClient, world):
        body = {
            "name": "No Profile",
            "email": "noprofile@example.com",
            "password": TEST_PASSWORD,
            "role": "CLIENT",
        }
        response = await client.post("/api/v1/users", json=body, headers=auth_headers(world.admin))
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_duplicate_email_rejected(self, client: AsyncClient, world):
        body = {
            "name": "Again",
            "email": "coordinator@example.com",
            "password": TEST_PASSWORD,
            "role": "EMPLOYEE",
            "employee_profile": {},
        }
        response = await client.post("/api/v1/users", json=body, headers=auth_headers(world.admin))
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "User already exists"

    async def test_only_admin_manages_users(self, client: AsyncClient, test_db, world):
        response = await client.get("/api/v1/users", headers=auth_headers(world.employee))
        assert response.status_code == status.HTTP_403_FORBIDDEN

        response = await client.get("/api/v1/users", headers=auth_headers(world.admin))
        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 5

    async def test_inactive_user_cannot_log_in(self, client: AsyncClient, test_db):
        user = await make_user(test_db, "gone@example.com", UserRole.CLIENT)
        user.is_active = False
        await test_db.commit()

        response = await client.post(
            "/api/v1/auth/login", data={"username": "gone@example.com", "password": TEST_PASSWORD}
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Incorrect email or password"

class TestHealth:
    async def test_health_reports_database(self, client: AsyncClient):
        response = await client.get("/api/v1/health")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["database"] == "connected"
