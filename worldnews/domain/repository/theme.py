"""Theme settings store interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Optional

from worldnews.domain.model import ThemeSettings

ThemeListener = Callable[[ThemeSettings], None]
ThemeChange = Callable[[Optional[ThemeSettings]], ThemeSettings]


class ThemeRepository(ABC):
    """Local key-value store holding the single theme settings blob.

    Implementations cache the blob in memory and must serve a fresh copy
    after any change, whether written in-process or externally.
    """

    @abstractmethod
    async def load(self) -> Optional[ThemeSettings]:
        """Read the last persisted settings.

        Returns:
            The settings, or None if nothing was persisted yet
        """
        pass

    @abstractmethod
    async def save(self, settings: ThemeSettings) -> None:
        """Persist settings as the new authoritative copy.

        The write replaces the previous copy in one step and then notifies
        every listener.

        Args:
            settings: Complete settings to persist
        """
        pass

    @abstractmethod
    async def update(self, change: ThemeChange) -> ThemeSettings:
        """Read, change and persist the settings as one serialized step.

        Concurrent updates never start from the same base, so each one
        sees the result of the previous.

        Args:
            change: Builds the new settings from the current ones (None if
                nothing was persisted yet)

        Returns:
            The persisted settings
        """
        pass

    @abstractmethod
    def watch(self, listener: ThemeListener) -> Callable[[], None]:
        """Register a change listener.

        Args:
            listener: Called with the new settings after each save

        Returns:
            A callable that unregisters the listener
        """
        pass
