"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .feed_service import FeedService
from .image_service import ImageService, ObjectStorage
from .jwt_service import JWTService
from .like_service import LikeService
from .post_service import PostService
from .share_service import ShareService
from .theme_service import ThemeService
from .user_service import UserService

__all__ = [
    "AuthService",
    "FeedService",
    "ImageService",
    "JWTService",
    "LikeService",
    "ObjectStorage",
    "PostService",
    "Service",
    "ShareService",
    "ThemeService",
    "UserService",
]
