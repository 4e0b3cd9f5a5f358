"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .storage import StorageProvider
from .theme import ThemeStoreProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401
from .theme import ProdThemeStoreProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "ProdThemeStoreProvider",
    "StorageProvider",
    "ThemeStoreProvider",
]
