"""Get feed use case."""

import logfire
from pydantic import BaseModel

from worldnews.application.usecase.views import PostItem, post_items
from worldnews.domain.model import Session
from worldnews.domain.service import FeedService, UserService
from worldnews.domain.value import Category, CountryCode


class GetFeedRequest(BaseModel):
    """Get feed request."""

    country: CountryCode | None = None
    category: Category | None = None
    session: Session | None = None


class GetFeedResponse(BaseModel):
    """Get feed response."""

    posts: list[PostItem]
    total: int


class GetFeedUseCase:
    """Use case for the public news feed."""

    def __init__(self, feed_service: FeedService, user_service: UserService) -> None:
        """Initialize get feed use case.

        Args:
            feed_service: Feed domain service
            user_service: User domain service
        """
        self.feed_service = feed_service
        self.user_service = user_service

    async def execute(self, request: GetFeedRequest) -> GetFeedResponse:
        """Active posts matching the filters, newest first, with authors."""
        with logfire.span(
            "get_feed.execute",
            country=request.country.value if request.country else None,
            category=request.category.value if request.category else None,
        ):
            posts = await self.feed_service.get_posts(request.country, request.category)
            items = await post_items(posts, self.user_service, request.session)
            return GetFeedResponse(posts=items, total=len(items))
