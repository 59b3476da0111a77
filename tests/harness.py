"""Fixture factory for tests that resolve services from the container.

Unit tests run every mockable component mocked, so the unit of work is the
in-memory one. Integration tests unmock ``persistence`` and need a migrated
PostgreSQL database at DATABASE__URL.
"""

import pytest_asyncio

from agora.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Create a fixture yielding a request-scoped container.

    The application container is closed after the test, which disposes the
    engine when persistence is unmocked.

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_toggle(unit_env):
            service = await unit_env.get(ReactionService)
    """

    @pytest_asyncio.fixture
    async def _environment():
        container = build_test_container(unmock=unmock)
        async with container() as request_container:
            yield request_container
        await container.close()

    return _environment
