"""Pytest configuration and fixtures."""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep test output quiet and predictable - must happen before app import
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DEV_MODE"] = "false"

# Clear the settings cache to pick up the new environment variables
from chessmoves.settings import get_settings  # noqa: E402

get_settings.cache_clear()

from chessmoves.main import app  # noqa: E402


@pytest.fixture
async def client() -> AsyncClient:
    """Create an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
