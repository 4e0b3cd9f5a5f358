"""Repository implementations."""

from .credential import PostgresCredentialRepository
from .post import PostgresPostRepository
from .theme import FileThemeRepository
from .user import PostgresUserRepository

__all__ = [
    "FileThemeRepository",
    "PostgresCredentialRepository",
    "PostgresPostRepository",
    "PostgresUserRepository",
]
