"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from worldnews.domain.model import Post
from worldnews.domain.value import Category, CountryCode, LikeState, PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Listings are ordered newest first, with the post id (descending) as the
    tie-breaker for identical timestamps.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active(
        self,
        country: Optional[CountryCode] = None,
        category: Optional[Category] = None,
    ) -> List[Post]:
        """Find active posts with optional equality filters.

        Args:
            country: Only posts tagged with this country (None for all)
            category: Only posts in this category (None for all)

        Returns:
            Matching active posts, newest first
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, include_inactive: bool = False
    ) -> List[Post]:
        """Find posts authored by a user.

        Args:
            user_id: The author
            include_inactive: Whether to include deactivated posts

        Returns:
            The user's posts, newest first
        """
        pass

    @abstractmethod
    async def find_all(self, include_inactive: bool = True) -> List[Post]:
        """Find every post.

        Args:
            include_inactive: Whether to include deactivated posts

        Returns:
            Posts, newest first
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update content fields).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def set_active(self, post_id: PostId, active: bool) -> Optional[Post]:
        """Set a post's active flag.

        Args:
            post_id: The post to update
            active: New active state

        Returns:
            The updated post, or None if it does not exist
        """
        pass

    @abstractmethod
    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[LikeState]:
        """Flip a user's membership in an active post's like set.

        Membership and the counter change together in one atomic step:
        removing the user decrements the counter, adding increments it.

        Args:
            post_id: The post being liked or unliked
            user_id: The acting user

        Returns:
            The new like state, or None if no active post has this ID
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Args:
            post_id: The post to delete

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every post authored by a user.

        Args:
            user_id: The author

        Returns:
            Number of posts deleted
        """
        pass

    @abstractmethod
    async def remove_likes_by(self, user_id: UserId) -> int:
        """Withdraw a user's like from every post that holds it.

        Each affected post loses the user from its like set and one from its
        counter in the same step, whether active or not.

        Args:
            user_id: The user whose likes are withdrawn

        Returns:
            Number of posts changed
        """
        pass
