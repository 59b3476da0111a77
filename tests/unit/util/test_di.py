"""Unit tests for provider selection."""

import pytest
from dishka import Provider

from agora.domain.repository import UnitOfWork
from agora.persistence.repository.inmemory import InMemoryUnitOfWork
from agora.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from agora.util.di.base import ProviderBase
from agora.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_used_as_is(self):
        """Providers without implementations are returned unchanged."""
        assert get_provider(ProdConfigProvider) is ProdConfigProvider
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_selects_production_implementation(self):
        """use_mock=False picks the production subclass."""
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider

    def test_selects_mock_implementation(self):
        """use_mock=True picks the mock subclass."""
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_missing_mock_raises(self):
        """A component without a mock cannot be mocked."""

        class CacheProvider(ProviderBase):
            __mock_component__ = "persistence"

        class ProdCacheProvider(CacheProvider):
            pass

        with pytest.raises(DependencyInjectionError, match="No mock implementation"):
            get_provider(CacheProvider, use_mock=True)

        assert issubclass(get_provider(CacheProvider), Provider)


class TestBuildTestContainer:
    """Tests for the test container builder."""

    def test_unknown_component_rejected(self):
        """Only declared components can be unmocked."""
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"cache"})

    @pytest.mark.asyncio
    async def test_unit_of_work_is_shared(self):
        """Request scopes share the application's unit of work."""
        container = build_test_container()

        async with container() as first:
            one = await first.get(UnitOfWork)
        async with container() as second:
            two = await second.get(UnitOfWork)

        assert isinstance(one, InMemoryUnitOfWork)
        assert one is two
        await container.close()
