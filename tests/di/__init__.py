"""Test doubles for the DI container.

Importing this package registers the mock providers with their component
bases, which is how ``build_test_container`` finds them.
"""

from .container import build_test_container
from .persistence import MockPersistenceProvider

__all__ = ["MockPersistenceProvider", "build_test_container"]
