"""In-memory post repository for testing."""

import asyncio
from typing import Optional

from worldnews.domain.model import Post
from worldnews.domain.repository import PostRepository
from worldnews.domain.value import Category, CountryCode, LikeState, PostId, UserId


def _newest_first(posts: list[Post]) -> list[Post]:
    return sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Like toggles run under a lock so the set and counter of a post are
    always replaced together.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._like_lock = asyncio.Lock()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_active(
        self,
        country: Optional[CountryCode] = None,
        category: Optional[Category] = None,
    ) -> list[Post]:
        """Find active posts with optional equality filters."""
        posts = [p for p in self._posts.values() if p.is_active]
        if country is not None:
            posts = [p for p in posts if p.country == country]
        if category is not None:
            posts = [p for p in posts if p.category == category]
        return _newest_first(posts)

    async def find_by_user(
        self, user_id: UserId, include_inactive: bool = False
    ) -> list[Post]:
        """Find posts authored by a user."""
        posts = [p for p in self._posts.values() if p.user_id == user_id]
        if not include_inactive:
            posts = [p for p in posts if p.is_active]
        return _newest_first(posts)

    async def find_all(self, include_inactive: bool = True) -> list[Post]:
        """Find every post."""
        posts = list(self._posts.values())
        if not include_inactive:
            posts = [p for p in posts if p.is_active]
        return _newest_first(posts)

    async def save(self, post: Post) -> Post:
        """Save a post's content fields; existing like state is kept."""
        existing = self._posts.get(post.id)
        if existing is not None:
            post = post.model_copy(
                update={"likes": existing.likes, "liked_by": existing.liked_by}
            )
        self._posts[post.id] = post
        return post

    async def set_active(self, post_id: PostId, active: bool) -> Optional[Post]:
        """Set a post's active flag."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(update={"is_active": active})
        self._posts[post_id] = updated
        return updated

    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[LikeState]:
        """Flip membership and counter together."""
        async with self._like_lock:
            post = self._posts.get(post_id)
            if post is None or not post.is_active:
                return None

            if user_id in post.liked_by:
                liked_by = post.liked_by - {user_id}
            else:
                liked_by = post.liked_by | {user_id}

            # Validated copy so the counter invariant is checked on every write
            updated = Post.model_validate(
                {**post.model_dump(), "liked_by": liked_by, "likes": len(liked_by)}
            )
            self._posts[post_id] = updated
            return LikeState(liked=user_id in liked_by, likes=updated.likes)

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every post authored by a user."""
        doomed = [pid for pid, p in self._posts.items() if p.user_id == user_id]
        for post_id in doomed:
            del self._posts[post_id]
        return len(doomed)

    async def remove_likes_by(self, user_id: UserId) -> int:
        """Drop a user from every like set, decrementing each counter."""
        async with self._like_lock:
            changed = 0
            for post_id, post in list(self._posts.items()):
                if user_id not in post.liked_by:
                    continue
                liked_by = post.liked_by - {user_id}
                self._posts[post_id] = Post.model_validate(
                    {**post.model_dump(), "liked_by": liked_by, "likes": len(liked_by)}
                )
                changed += 1
            return changed
