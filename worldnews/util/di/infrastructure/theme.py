"""Theme store infrastructure providers."""

from dishka import Scope, provide

from worldnews.config import Settings
from worldnews.domain.repository import ThemeRepository
from worldnews.persistence.repository import FileThemeRepository
from worldnews.util.di.base import ProviderBase


class ThemeStoreProvider(ProviderBase):
    """Theme store component base."""

    __mock_component__ = "theme"


class ProdThemeStoreProvider(ThemeStoreProvider):
    """Production theme store backed by a JSON file.

    APP-scoped so every request shares one cache and one listener list.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_theme_repository(self, settings: Settings) -> ThemeRepository:
        """Provide the theme settings store."""
        return FileThemeRepository(settings.theme.path)
