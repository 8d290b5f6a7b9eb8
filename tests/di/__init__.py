"""Mock providers for testing."""

from .backend import MockBackendProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockBackendProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
