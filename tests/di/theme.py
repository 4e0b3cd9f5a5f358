"""Mock theme store provider for testing."""

from dishka import Scope, provide

from worldnews.domain.repository import ThemeRepository
from worldnews.persistence.repository.inmemory import InMemoryThemeRepository
from worldnews.util.di.infrastructure.theme import ThemeStoreProvider


class MockThemeStoreProvider(ThemeStoreProvider):
    """Theme store held in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_theme_repository(self) -> ThemeRepository:
        """Provide in-memory theme store."""
        return InMemoryThemeRepository()
