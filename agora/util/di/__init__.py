"""Dependency injection module."""

from typing import Type

from agora.util.di.application import ProdApplicationProvider
from agora.util.di.base import Component, ProviderBase
from agora.util.di.core import ProdConfigProvider
from agora.util.di.domain import ProdDomainProvider
from agora.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Layers in dependency order; component bases are resolved by get_provider
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Components that currently have a registered mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__
        and any(sub.__is_mock__ for sub in base.__subclasses__())
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of ``base`` to instantiate.

    Concrete providers (no subclasses) are returned unchanged. For a
    component base, the subclass whose ``__is_mock__`` equals ``use_mock``
    is returned.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
]
