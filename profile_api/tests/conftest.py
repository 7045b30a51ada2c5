"""Shared fixtures: in-memory database, app client and user helpers."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from profile_api.core.config import Settings
from profile_api.db.session import Database
from profile_api.main import create_app

API = "/api/v1"


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at an in-memory database and a temporary image directory."""
    return Settings(
        app_env="test",
        database_url="sqlite+aiosqlite://",
        image_store="local",
        image_local_path=str(tmp_path / "images"),
        auto_create_tables=True,
    )


@pytest_asyncio.fixture
async def database(test_settings):
    database = Database(test_settings)
    await database.create_all()
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def client(test_settings):
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_user(client):
    """Register and log in a user, returning ``(user_id, auth_headers)``.

    The cookie jar is cleared afterwards so each request authenticates only
    through the headers it is given.
    """

    def _make_user(email: str = "ada@lovelace.io", password: str = "analytical-engine", name: str = "Ada"):
        response = client.post(f"{API}/auth/register", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        user_id = response.json()["id"]

        response = client.post(f"{API}/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        token = response.json()["token"]
        client.cookies.clear()

        return user_id, {"Authorization": f"Bearer {token}"}

    return _make_user
