"""Domain value objects for World News."""

from worldnews.domain.value.identifiers import CredentialId, PostId, UserId
from worldnews.domain.value.types import (
    COUNTRIES,
    Category,
    Contact,
    ContactType,
    CountryCode,
    CountryInfo,
    FontFamily,
    FontSize,
    Handle,
    ImageSize,
    LikeState,
    SharePlatform,
)

__all__ = [
    # Identifiers
    "UserId",
    "CredentialId",
    "PostId",
    # Types
    "Category",
    "CountryCode",
    "CountryInfo",
    "COUNTRIES",
    "ContactType",
    "Contact",
    "Handle",
    "FontSize",
    "ImageSize",
    "FontFamily",
    "SharePlatform",
    "LikeState",
]
