"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .theme import MockThemeStoreProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockStorageProvider",
    "MockThemeStoreProvider",
    "build_test_container",
]
