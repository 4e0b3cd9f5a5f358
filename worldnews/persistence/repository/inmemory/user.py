"""In-memory user repository for testing."""

from typing import Optional

from worldnews.domain.model import User
from worldnews.domain.repository import UserRepository
from worldnews.domain.value import UserId
from worldnews.domain.value.types import Handle


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Handle) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_all(self) -> list[User]:
        """List every user, newest first."""
        return sorted(
            self._users.values(), key=lambda u: (u.created_at, u.id), reverse=True
        )

    async def save(self, user: User) -> User:
        """Save a user."""
        self._users[user.id] = user
        return user

    async def set_active(self, user_id: UserId, active: bool) -> Optional[User]:
        """Set a user's active flag."""
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update={"is_active": active})
        self._users[user_id] = updated
        return updated

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        return self._users.pop(user_id, None) is not None
