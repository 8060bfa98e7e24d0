import os
import pytest
from httpx import AsyncClient
from fastapi import status

from medcase.core.config import settings
from tests.helpers import auth_headers

pytestmark = pytest.mark.asyncio

class TestUpload:
    async def test_pdf_is_stored(self, client: AsyncClient, world):
        response = await client.post(
            "/api/v1/upload",
            files={"file": ("report.PDF", b"%PDF-1.4 test", "application/pdf")},
            headers=auth_headers(world.client_user),
        )
        assert response.status_code == status.HTTP_200_OK
        url = response.json()["url"]
        assert url.startswith("/uploads/")
        assert url.endswith(".pdf")

        stored = os.path.join(settings.UPLOAD_DIR, url.rsplit("/", 1)[-1])
        with open(stored, "rb") as f:
            assert f.read() == b"%PDF-1.4 test"

    async def test_oversized_file_rejected_whatever_its_type(self, client: AsyncClient, world):
        big = b"0" * (6 * 1024 * 1024)
        for name, content_type in (("scan.png", "image/png"), ("setup.exe", "application/x-msdownload")):
            response = await client.post(
                "/api/v1/upload",
                files={"file": (name, big, content_type)},
                headers=auth_headers(world.admin),
            )
            assert response.status_code == status.HTTP_400_BAD_REQUEST
            assert response.json()["detail"] == "File size exceeds 5MB limit"

    async def test_disallowed_type_rejected_whatever_its_size(self, client: AsyncClient, world):
        response = await client.post(
            "/api/v1/upload",
            files={"file": ("setup.exe", b"MZ", "application/x-msdownload")},
            headers=auth_headers(world.admin),
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "File type not allowed"

    async def test_disallowed_extension_rejected_despite_allowed_type(self, client: AsyncClient, world):
        response = await client.post(
            "/api/v1/upload",
            files={"file": ("setup.exe", b"MZ\x90\x00", "application/pdf")},
            headers=auth_headers(world.admin),
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "File type not allowed"
        assert not any(name.endswith(".exe") for name in os.listdir(settings.UPLOAD_DIR))

    async def test_file_without_extension_rejected(self, client: AsyncClient, world):
        response = await client.post(
            "/api/v1/upload",
            files={"file": ("report", b"%PDF-1.4", "application/pdf")},
            headers=auth_headers(world.admin),
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "File type not allowed"

    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/upload",
            files={"file": ("report.pdf", b"%PDF", "application/pdf")},
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
