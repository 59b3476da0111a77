"""Dependency injection.

``PROVIDERS`` lists one provider class per layer. A provider with subclasses
is a mockable component: its subclasses are the production and mock
implementations, told apart by ``__is_mock__``. Tests swap in the mock for
``persistence`` (the in-memory unit of work); production always uses the
PostgreSQL one.
"""

from typing import Type

from agora.util.di.application import ProdApplicationProvider
from agora.util.di.base import Component, ProviderBase
from agora.util.di.core import ProdConfigProvider
from agora.util.di.domain import ProdDomainProvider
from agora.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from agora.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a registered provider to the class to instantiate.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        ``base`` itself when it has no implementations, otherwise the
        matching subclass

    Raises:
        DependencyInjectionError: If the component lacks the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
