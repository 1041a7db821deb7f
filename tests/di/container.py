"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from persona.util.di import PROVIDERS, Component, ProviderBase, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where mockable components default to their mocks.

    Settings are loaded from environment variables.

    Args:
        unmock: Components to run with their production providers

    Returns:
        Container that also serves a FastAPI app under TestClient

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        build_test_container()  # in-memory repositories
        build_test_container(unmock={"persistence"})  # PostgreSQL
    """
    unmock = unmock or set()
    unknown = unmock - _mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(base, use_mock=_uses_mock(base, unmock))() for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def _uses_mock(base: type[ProviderBase], unmock: set[Component]) -> bool:
    component = base.__mock_component__
    return component is not None and component not in unmock


def _mockable_components() -> set[str]:
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }
