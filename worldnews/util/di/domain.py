"""Domain layer DI providers."""

from dishka import Scope, provide

from worldnews.config import AuthSettings, Settings
from worldnews.domain.repository import (
    CredentialRepository,
    PostRepository,
    ThemeRepository,
    UserRepository,
)
from worldnews.domain.service import (
    AuthService,
    FeedService,
    ImageService,
    JWTService,
    LikeService,
    ObjectStorage,
    PostService,
    ShareService,
    ThemeService,
    UserService,
)
from worldnews.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self,
        credential_repository: CredentialRepository,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide registration and sign-in domain service."""
        return AuthService(
            credential_repository=credential_repository,
            user_repository=user_repository,
            auth_settings=auth_settings,
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        credential_repository: CredentialRepository,
        post_repository: PostRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            credential_repository=credential_repository,
            post_repository=post_repository,
        )

    @provide
    def get_image_service(
        self, storage: ObjectStorage, settings: Settings
    ) -> ImageService:
        """Provide image upload domain service."""
        return ImageService(
            storage=storage, max_image_bytes=settings.storage.max_image_bytes
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, image_service: ImageService
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, image_service=image_service)

    @provide
    def get_like_service(self, post_repository: PostRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(post_repository=post_repository)

    @provide
    def get_feed_service(self, post_repository: PostRepository) -> FeedService:
        """Provide feed domain service."""
        return FeedService(post_repository=post_repository)

    @provide
    def get_share_service(self, settings: Settings) -> ShareService:
        """Provide share link domain service."""
        return ShareService(frontend_url=settings.api.frontend_url)

    @provide
    def get_theme_service(self, theme_repository: ThemeRepository) -> ThemeService:
        """Provide theme domain service."""
        return ThemeService(theme_repository=theme_repository)
