"""Compare countries use case."""

import logfire
from pydantic import BaseModel

from worldnews.application.usecase.views import PostItem, post_items
from worldnews.config import FeedSettings
from worldnews.domain.model import FeedSelection, FeedSlot, Session
from worldnews.domain.service import FeedService, UserService
from worldnews.domain.value import Category, CountryCode, CountryInfo


class CompareCountriesRequest(BaseModel):
    """Compare countries request.

    Omitted countries fall back to the configured defaults.
    """

    left: CountryCode | None = None
    right: CountryCode | None = None
    category: Category | None = None
    session: Session | None = None


class FeedColumn(BaseModel):
    """One side of the comparison."""

    country: CountryInfo
    posts: list[PostItem]


class CompareCountriesResponse(BaseModel):
    """Compare countries response."""

    left: FeedColumn
    right: FeedColumn
    category: Category | None


class CompareCountriesUseCase:
    """Use case for the side-by-side country feed."""

    def __init__(
        self,
        feed_service: FeedService,
        user_service: UserService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize compare countries use case.

        Args:
            feed_service: Feed domain service
            user_service: User domain service
            feed_settings: Default column countries
        """
        self.feed_service = feed_service
        self.user_service = user_service
        self.feed_settings = feed_settings

    def selection_for(self, request: CompareCountriesRequest) -> FeedSelection:
        """Apply the requested countries to the default selection.

        Two distinct countries replace both defaults. Otherwise the left slot
        is applied first, and a country already shown in the other slot
        leaves that slot unchanged.
        """
        if (
            request.left is not None
            and request.right is not None
            and request.left != request.right
        ):
            return FeedSelection(left=request.left, right=request.right)

        selection = FeedSelection(
            left=CountryCode(self.feed_settings.default_left_country),
            right=CountryCode(self.feed_settings.default_right_country),
        )
        if request.left is not None:
            selection = selection.select(FeedSlot.LEFT, request.left)
        if request.right is not None:
            selection = selection.select(FeedSlot.RIGHT, request.right)
        return selection

    async def execute(self, request: CompareCountriesRequest) -> CompareCountriesResponse:
        """Fetch both columns in full."""
        selection = self.selection_for(request)
        with logfire.span(
            "compare_countries.execute",
            left=selection.left.value,
            right=selection.right.value,
        ):
            left, right = await self.feed_service.compare(selection, request.category)
            return CompareCountriesResponse(
                left=FeedColumn(
                    country=selection.left.info,
                    posts=await post_items(left, self.user_service, request.session),
                ),
                right=FeedColumn(
                    country=selection.right.info,
                    posts=await post_items(right, self.user_service, request.session),
                ),
                category=request.category,
            )
