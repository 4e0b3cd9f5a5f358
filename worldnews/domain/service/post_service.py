"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from worldnews.domain.error import NotFoundError
from worldnews.domain.model import Post, Session
from worldnews.domain.repository import PostRepository
from worldnews.domain.value import Category, CountryCode, PostId, UserId

from .authorization import (
    can_view,
    is_admin,
    require_admin,
    require_member,
    require_owner,
    require_owner_or_admin,
)
from .base import Service
from .image_service import ImageService


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, image_service: ImageService
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            image_service: Image upload service
        """
        self.post_repository = post_repository
        self.image_service = image_service

    async def create_post(
        self,
        session: Session,
        country: CountryCode,
        category: Category,
        title: str,
        content: str,
        image: str,
        image_filename: str | None = None,
    ) -> Post:
        """Create a post owned by the session's user.

        Guests are rejected before the image is uploaded.

        Args:
            session: Acting session
            country: Country tag
            category: Category
            title: Headline
            content: Body text
            image: Image URL or data URL
            image_filename: Original file name of an inline image

        Returns:
            The created post

        Raises:
            NotAuthorizedError: If the session is a guest
            ImageTooLargeError: If the inline image exceeds the limit
            InvalidImageError: If the image reference is unusable
        """
        with logfire.span(
            "post_service.create_post",
            user_id=session.actor_id,
            country=country.value,
            category=category.value,
        ):
            user_id = require_member(session, "post", "new")
            image_url = await self.image_service.resolve(image, user_id, image_filename)

            post = Post(
                id=PostId(uuid4()),
                user_id=user_id,
                country=country,
                category=category,
                title=title,
                content=content,
                image=image_url,
                created_at=datetime.now(),
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post(self, session: Session | None, post_id: PostId) -> Post:
        """Get a post the session is allowed to see.

        Raises:
            NotFoundError: If missing or inactive and not visible to the session
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None or not can_view(session, post):
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def update_post(
        self,
        session: Session,
        post_id: PostId,
        changes: dict,
        image_filename: str | None = None,
    ) -> Post:
        """Update content fields of a post (owner only).

        Args:
            session: Acting session
            post_id: Post to update
            changes: Subset of title, content, country, category, image
            image_filename: Original file name of an inline image

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the session did not author the post
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            user_id=session.actor_id,
            fields=sorted(changes),
        ):
            require_member(session, "post", str(post_id))
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", str(post_id))
            require_owner(session, post)

            if "image" in changes:
                changes = {
                    **changes,
                    "image": await self.image_service.resolve(
                        changes["image"], post.user_id, image_filename
                    ),
                }

            # Re-validate through the model so field rules still apply
            updated = Post.model_validate({**post.model_dump(), **changes})
            saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=str(post_id))
            return saved

    async def delete_post(self, session: Session, post_id: PostId) -> None:
        """Delete a post (owner or admin).

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the session is neither owner nor admin
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=session.actor_id
        ):
            require_member(session, "post", str(post_id))
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", str(post_id))
            require_owner_or_admin(session, post)

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def set_active(self, session: Session, post_id: PostId, active: bool) -> Post:
        """Activate or deactivate a post (owner or admin).

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the session is neither owner nor admin
        """
        with logfire.span(
            "post_service.set_active",
            post_id=str(post_id),
            user_id=session.actor_id,
            active=active,
        ):
            require_member(session, "post", str(post_id))
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", str(post_id))
            require_owner_or_admin(session, post)

            updated = await self.post_repository.set_active(post_id, active)
            if updated is None:
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post status changed", post_id=str(post_id), active=active)
            return updated

    async def list_user_posts(
        self, session: Session | None, user_id: UserId
    ) -> list[Post]:
        """Posts by one author, newest first.

        Inactive posts are included for the author themself and admins.
        """
        with logfire.span("post_service.list_user_posts", user_id=str(user_id)):
            include_inactive = session is not None and (
                session.user_id == user_id or is_admin(session)
            )
            posts = await self.post_repository.find_by_user(
                user_id, include_inactive=include_inactive
            )
            logfire.info("User posts listed", user_id=str(user_id), count=len(posts))
            return posts

    async def list_all_posts(self, session: Session) -> list[Post]:
        """Every post including inactive ones (admin only)."""
        with logfire.span("post_service.list_all_posts", actor=session.actor_id):
            require_admin(session, "posts", "*")
            return await self.post_repository.find_all(include_inactive=True)
