import os
import tempfile

# Settings are read at import time, so the test environment goes first
_TEST_DIR = tempfile.mkdtemp(prefix="medcase-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["UPLOAD_DIR"] = os.path.join(_TEST_DIR, "uploads")
os.environ["PASSWORD_HASH_ROUNDS"] = "10"
os.environ["ENABLE_RESPONSE_COMPRESSION"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from main import app
from medcase.core.database import AsyncSessionLocal, create_tables, drop_tables
from tests.helpers import World, build_world

@pytest.fixture
async def test_db_setup() -> AsyncGenerator[None, None]:
    """Fresh schema for every test."""
    await drop_tables()
    await create_tables()
    yield
    await drop_tables()

@pytest.fixture
async def test_db(test_db_setup) -> AsyncGenerator[AsyncSession, None]:
    """Create a new database session for a test."""
    async with AsyncSessionLocal() as session:
        yield session

@pytest.fixture
async def client(test_db_setup) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client talking to the app in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

@pytest.fixture
async def world(test_db: AsyncSession) -> World:
    return await build_world(test_db)
