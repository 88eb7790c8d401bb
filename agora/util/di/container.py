"""Container assembly."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from agora.util.di import PROVIDERS, Component, get_provider


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the application container.

    Args:
        mocked: Components to replace with their in-memory implementation.
            Production passes nothing; tests use tests.di.build_test_container.

    Returns:
        Container with one provider per layer, plus FastAPI request context
    """
    providers = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
