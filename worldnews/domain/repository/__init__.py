"""Repository interfaces for the World News domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from worldnews.domain.repository.credential import CredentialRepository
from worldnews.domain.repository.post import PostRepository
from worldnews.domain.repository.theme import ThemeRepository
from worldnews.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "CredentialRepository",
    "PostRepository",
    "ThemeRepository",
]
