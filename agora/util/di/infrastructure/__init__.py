"""Infrastructure DI providers."""

from agora.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
