"""In-memory repository implementations for testing."""

from .credential import InMemoryCredentialRepository
from .post import InMemoryPostRepository
from .theme import InMemoryThemeRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCredentialRepository",
    "InMemoryPostRepository",
    "InMemoryThemeRepository",
    "InMemoryUserRepository",
]
