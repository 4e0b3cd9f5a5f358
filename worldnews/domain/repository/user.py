"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from worldnews.domain.model import User
from worldnews.domain.value import UserId
from worldnews.domain.value.types import Handle


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Handle) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The username to search for

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """List every user, newest first.

        Returns:
            All users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def set_active(self, user_id: UserId, active: bool) -> Optional[User]:
        """Set a user's active flag.

        Args:
            user_id: The user to update
            active: New active state

        Returns:
            The updated user, or None if the user does not exist
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Args:
            user_id: The user to delete

        Returns:
            True if a user was deleted
        """
        pass
