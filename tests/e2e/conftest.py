"""Fixtures for end-to-end API tests."""

import httpx
import pytest_asyncio

from agora.interface.api.app import create_app
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    """Test container shared by the app and the test's seeding helpers."""
    test_container = build_test_container()
    yield test_container
    await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client bound to an app using the test container."""
    app_instance = create_app(container)
    transport = httpx.ASGITransport(app=app_instance)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
