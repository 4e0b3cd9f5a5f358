"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from worldnews.config import AuthSettings, FeedSettings, Settings
from worldnews.util.di.base import ProviderBase
from worldnews.util.error import ConfigurationError

_DEFAULT_SECRET = AuthSettings.model_fields["jwt_secret"].default


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with the placeholder JWT secret
        """
        settings = Settings()
        if settings.is_production and settings.auth.jwt_secret == _DEFAULT_SECRET:
            raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        """Provide feed settings."""
        return settings.feed
