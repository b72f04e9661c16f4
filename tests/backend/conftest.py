"""
Backend-specific test fixtures and configuration.

These fixtures wire the FastAPI app to the mock MongoDB and Redis and
provide helpers for registering and logging in users over HTTP.
"""

import pytest
import pytest_asyncio


# =============================================================================
# App Override Helpers
# =============================================================================

@pytest.fixture
def app_with_mocks(storage, mock_async_redis):
    """
    The FastAPI app with storage and Redis dependencies overridden.

    Lifespan is not run, so no real database connection is attempted.
    """
    from tradejournal.dependencies.database import get_redis, get_storage
    from tradejournal.main import app

    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_redis] = lambda: mock_async_redis
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app_with_mocks):
    """Async HTTP client talking to the app in-process."""
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app_with_mocks),
        base_url="http://test"
    ) as ac:
        yield ac


# =============================================================================
# Auth Helpers
# =============================================================================

@pytest.fixture
def register_and_login(async_client):
    """
    Register a user over HTTP, log in and return (user, token).

    Usage:
        user, token = await register_and_login("bob", "bob@x.com")
    """
    async def _register_and_login(
        username: str = "alice",
        email: str = "a@x.com",
        password: str = "SecurePassword123!",
    ):
        response = await async_client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text

        response = await async_client.post(
            "/api/auth/login",
            json={"email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        data = response.json()
        return data["user"], data["access_token"]

    return _register_and_login


@pytest.fixture
def trade_payload() -> dict:
    """JSON body for creating a trade."""
    return {
        "instrument": "EURUSD",
        "direction": "short",
        "entry_price": 1.0875,
        "entry_date": "2024-03-01T09:00:00Z",
        "quantity": 10000,
    }


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in str(data["detail"]).lower()
    return _assert
