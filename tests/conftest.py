import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from booking_api.core.config import Settings
from booking_api.main import create_app

TEST_PASSCODE = "test-passcode"


@pytest.fixture
def test_settings():
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        ADMIN_PASSCODE=TEST_PASSCODE,
        ENVIRONMENT="test",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(test_settings):
    """A new application instance per test, so no bookings leak between tests."""
    return create_app(test_settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest_asyncio.fixture
async def async_client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def admin_token(client):
    response = client.post("/api/admin/login", json={"passcode": TEST_PASSCODE})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def sample_booking_data():
    """Booking payload for a Tuesday morning slot."""
    return {
        "date": "2025-10-28",
        "time": "09:00 AM - 10:00 AM",
        "name": "A",
        "email": "a@x.com",
        "address": "1 Main St",
    }
