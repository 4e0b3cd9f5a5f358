"""Feed composition service."""

import logfire

from worldnews.domain.model import FeedSelection, Post
from worldnews.domain.repository import PostRepository
from worldnews.domain.value import Category, CountryCode

from .base import Service


class FeedService(Service):
    """Builds the public feed and the dual-country comparison."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize feed service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_posts(
        self,
        country: CountryCode | None = None,
        category: Category | None = None,
    ) -> list[Post]:
        """Active posts matching the filters, newest first.

        Args:
            country: Equality filter on country (None for all)
            category: Equality filter on category (None for all)

        Returns:
            Posts ordered by creation time descending, then ID descending
        """
        with logfire.span(
            "feed_service.get_posts",
            country=country.value if country else None,
            category=category.value if category else None,
        ):
            posts = await self.post_repository.find_active(country, category)
            logfire.info("Feed fetched", count=len(posts))
            return posts

    async def compare(
        self, selection: FeedSelection, category: Category | None = None
    ) -> tuple[list[Post], list[Post]]:
        """Fetch both comparison columns in full.

        Each column is an independent feed query.

        Returns:
            Posts for the left and right countries
        """
        with logfire.span(
            "feed_service.compare",
            left=selection.left.value,
            right=selection.right.value,
            category=category.value if category else None,
        ):
            left = await self.get_posts(selection.left, category)
            right = await self.get_posts(selection.right, category)
            return left, right
