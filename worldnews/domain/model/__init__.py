"""Domain model entities for World News."""

from worldnews.domain.model.credential import Credential
from worldnews.domain.model.feed import FeedSelection, FeedSlot
from worldnews.domain.model.post import Post
from worldnews.domain.model.session import Session
from worldnews.domain.model.theme import ThemeApplication, ThemeSettings, ThemeUpdate
from worldnews.domain.model.user import User

__all__ = [
    "User",
    "Credential",
    "FeedSelection",
    "FeedSlot",
    "Post",
    "Session",
    "ThemeSettings",
    "ThemeUpdate",
    "ThemeApplication",
]
