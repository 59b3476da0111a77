"""Test container builder."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from agora.util.di import PROVIDERS, Component, get_provider


def mockable_components() -> set[Component]:
    """Components that have a mock implementation to swap out."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container with every mockable component mocked.

    Args:
        unmock: Components to run with their production implementation,
            e.g. ``{"persistence"}`` for the PostgreSQL integration tests

    Returns:
        Application-scoped container; the FastAPI provider is included so
        the same container can back an app under test

    Raises:
        ValueError: If an unknown component is named
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=bool(base.__mock_component__)
            and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
