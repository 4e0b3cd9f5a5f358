"""Feed use cases."""

from .compare_countries import (
    CompareCountriesRequest,
    CompareCountriesResponse,
    CompareCountriesUseCase,
    FeedColumn,
)
from .get_feed import GetFeedRequest, GetFeedResponse, GetFeedUseCase

__all__ = [
    "CompareCountriesRequest",
    "CompareCountriesResponse",
    "CompareCountriesUseCase",
    "FeedColumn",
    "GetFeedRequest",
    "GetFeedResponse",
    "GetFeedUseCase",
]
