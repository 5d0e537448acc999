"""
Item Service — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (all function-scoped, created fresh for each test):
    ├── store: An empty ItemStore
    ├── test_settings: Settings for the "test" run mode
    ├── test_app: A FastAPI app with its own empty store
    ├── test_client: HTTPX AsyncClient bound to test_app
    └── lenient_client: Same, but returns 500 responses instead of raising
"""

import os

# Must be set before itemservice.config builds its singleton
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from itemservice.config import Settings
from itemservice.main import create_app
from itemservice.services.item_store import ItemStore


@pytest.fixture
def store():
    return ItemStore()


@pytest.fixture
def test_settings():
    return Settings(app_env="test", log_level="WARNING")


@pytest.fixture
def test_app(test_settings):
    """A fresh application; each one owns its own empty ItemStore."""
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/items")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def lenient_client(test_app):
    """
    Client for testing unexpected failures.

    Starlette re-raises unhandled exceptions after the catch-all handler has
    produced its 500 response; this transport hands back that response.
    """
    transport = ASGITransport(app=test_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
