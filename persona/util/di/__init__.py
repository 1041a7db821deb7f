"""Dependency injection wiring.

Providers are registered in ``PROVIDERS``. A provider with subclasses is a
mockable component: its subclasses are the production and mock variants,
told apart by ``__is_mock__``.
"""

from typing import Type

from persona.util.di.application import ProdApplicationProvider
from persona.util.di.base import Component, ProviderBase
from persona.util.di.core import ProdConfigProvider
from persona.util.di.domain import ProdDomainProvider
from persona.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from persona.util.di.security import ProdSecurityProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    ProdSecurityProvider,
    PersistenceProvider,  # mockable: "persistence"
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a registered provider to the class to instantiate.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock variant of a mockable component

    Returns:
        ``base`` itself for plain providers, otherwise the matching variant

    Raises:
        ValueError: If the component has no variant of the requested kind
    """
    variants = {
        getattr(variant, "__is_mock__", False): variant
        for variant in base.__subclasses__()
    }
    if not variants:
        return base

    try:
        return variants[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} provider registered for {component}") from None


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "ProdSecurityProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
