"""User domain service."""

import logfire

from worldnews.domain.error import BusinessRuleViolationError, NotFoundError
from worldnews.domain.model import Session, User
from worldnews.domain.repository import (
    CredentialRepository,
    PostRepository,
    UserRepository,
)
from worldnews.domain.value import UserId

from .authorization import require_admin
from .base import Service


class UserService(Service):
    """Domain service for user lookups and moderation."""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: CredentialRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            credential_repository: Credential repository
            post_repository: Post repository
        """
        self.user_repository = user_repository
        self.credential_repository = credential_repository
        self.post_repository = post_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None if missing."""
        return await self.user_repository.find_by_id(user_id)

    async def get_authors(self, user_ids: set[UserId]) -> dict[UserId, User]:
        """Look up the authors of a batch of posts.

        Each author is a separate point read; missing authors are skipped.

        Args:
            user_ids: Author IDs

        Returns:
            Map of ID to user for the authors that exist
        """
        with logfire.span("user_service.get_authors", count=len(user_ids)):
            authors: dict[UserId, User] = {}
            for user_id in user_ids:
                user = await self.user_repository.find_by_id(user_id)
                if user:
                    authors[user_id] = user
            return authors

    async def list_users(self, session: Session) -> list[User]:
        """List every user (admin only).

        Raises:
            NotAuthorizedError: If the session is not an admin
        """
        with logfire.span("user_service.list_users", actor=session.actor_id):
            require_admin(session, "users", "*")
            users = await self.user_repository.find_all()
            logfire.info("Users listed", count=len(users))
            return users

    async def set_active(self, session: Session, user_id: UserId, active: bool) -> User:
        """Activate or deactivate a user (admin only, never oneself).

        Args:
            session: Acting admin
            user_id: Target user
            active: New active state

        Returns:
            The updated user

        Raises:
            NotAuthorizedError: If the session is not an admin
            BusinessRuleViolationError: If an admin targets their own account
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "user_service.set_active",
            actor=session.actor_id,
            user_id=str(user_id),
            active=active,
        ):
            require_admin(session, "user", str(user_id))
            if user_id == session.user_id:
                logfire.warn("Admin attempted to change own status", user_id=str(user_id))
                raise BusinessRuleViolationError(
                    "Admins cannot change the status of their own account"
                )

            user = await self.user_repository.set_active(user_id, active)
            if user is None:
                raise NotFoundError("User", str(user_id))

            logfire.info("User status changed", user_id=str(user_id), active=active)
            return user

    async def delete_user(self, session: Session, user_id: UserId) -> None:
        """Delete a user with their credentials, posts and likes (admin only, never oneself).

        Raises:
            NotAuthorizedError: If the session is not an admin
            BusinessRuleViolationError: If an admin targets their own account
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "user_service.delete_user", actor=session.actor_id, user_id=str(user_id)
        ):
            require_admin(session, "user", str(user_id))
            if user_id == session.user_id:
                logfire.warn("Admin attempted to delete own account", user_id=str(user_id))
                raise BusinessRuleViolationError("Admins cannot delete their own account")

            if await self.user_repository.find_by_id(user_id) is None:
                raise NotFoundError("User", str(user_id))

            posts = await self.post_repository.delete_by_user(user_id)
            unliked = await self.post_repository.remove_likes_by(user_id)
            credentials = await self.credential_repository.delete_by_user_id(user_id)
            await self.user_repository.delete(user_id)

            logfire.info(
                "User deleted",
                user_id=str(user_id),
                posts_deleted=posts,
                likes_withdrawn=unliked,
                credentials_deleted=credentials,
            )
