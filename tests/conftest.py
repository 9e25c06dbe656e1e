# tests/conftest.py
import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from donation_api.core.config import Settings
from donation_api.main import create_app

API = "/api/v1"

@pytest.fixture(scope="session")
def anyio_backend():
    # keep AnyIO on asyncio for the whole test session
    return "asyncio"

@pytest.fixture
def settings():
    return Settings(_env_file=None, use_mongo=False, jwt_secret="test-secret", expires_in="1h")

@pytest.fixture
def app(settings):
    # fresh app (and fresh in-memory store) per test
    return create_app(settings)

@pytest.fixture
async def test_client(app):
    async with LifespanManager(app):
        transport = ASGITransport(app=app, raise_app_exceptions=True)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
