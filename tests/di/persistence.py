"""Mock persistence providers for testing."""

from dishka import Scope, provide

from agora.domain.repository import UnitOfWork
from agora.persistence.repository.inmemory import InMemoryUnitOfWork
from agora.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using the in-memory unit of work.

    The unit of work is APP-scoped, so every request container opened from
    one test container sees the same store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork()
