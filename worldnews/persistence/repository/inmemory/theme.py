"""In-memory theme settings store for testing."""

import asyncio
from collections.abc import Callable
from typing import Optional

from worldnews.domain.model import ThemeSettings
from worldnews.domain.repository import ThemeRepository
from worldnews.domain.repository.theme import ThemeChange, ThemeListener


class InMemoryThemeRepository(ThemeRepository):
    """In-memory implementation of ThemeRepository for testing."""

    def __init__(self) -> None:
        self._settings: Optional[ThemeSettings] = None
        self._listeners: list[ThemeListener] = []
        self._lock = asyncio.Lock()
        self.save_count = 0

    async def load(self) -> Optional[ThemeSettings]:
        """Read the stored settings."""
        return self._settings

    async def save(self, settings: ThemeSettings) -> None:
        """Replace the stored settings and notify listeners."""
        async with self._lock:
            self._store(settings)
        self._notify(settings)

    async def update(self, change: ThemeChange) -> ThemeSettings:
        """Apply a change to the stored settings under the lock."""
        async with self._lock:
            settings = change(await self.load())
            self._store(settings)
        self._notify(settings)
        return settings

    def _store(self, settings: ThemeSettings) -> None:
        self._settings = settings
        self.save_count += 1

    def _notify(self, settings: ThemeSettings) -> None:
        for listener in list(self._listeners):
            listener(settings)

    def watch(self, listener: ThemeListener) -> Callable[[], None]:
        """Register a change listener."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
