"""Theme settings service."""

from collections.abc import Callable

import logfire

from worldnews.domain.model import Session, ThemeApplication, ThemeSettings, ThemeUpdate
from worldnews.domain.repository import ThemeRepository
from worldnews.domain.repository.theme import ThemeListener

from .authorization import require_admin
from .base import Service


class ThemeService(Service):
    """Reads, merges and applies the site theme."""

    def __init__(self, theme_repository: ThemeRepository) -> None:
        """Initialize theme service.

        Args:
            theme_repository: Theme settings store
        """
        self.theme_repository = theme_repository

    async def get_theme(self) -> ThemeSettings:
        """Last persisted settings, or the defaults if none were saved."""
        with logfire.span("theme_service.get_theme"):
            settings = await self.theme_repository.load()
            return settings if settings is not None else ThemeSettings()

    async def update_theme(
        self, session: Session, update: ThemeUpdate
    ) -> ThemeApplication:
        """Merge a partial update, persist it and return its effects.

        Unset fields keep their current values. The merged settings are
        persisted before the effect batch is produced, so the stored copy is
        always the applied one.

        Args:
            session: Acting session (must be admin)
            update: Fields to change

        Returns:
            Every visual effect of the merged settings

        Raises:
            NotAuthorizedError: If the session is not an admin
        """
        changed = sorted(update.model_dump(exclude_none=True))
        with logfire.span(
            "theme_service.update_theme", actor=session.actor_id, fields=changed
        ):
            require_admin(session, "theme", "site")

            merged = await self.theme_repository.update(
                lambda current: (current or ThemeSettings()).merge(update)
            )

            logfire.info("Theme updated", fields=changed)
            return ThemeApplication.from_settings(merged)

    async def current_application(self) -> ThemeApplication:
        """Effects of the current settings."""
        return ThemeApplication.from_settings(await self.get_theme())

    def watch(self, listener: ThemeListener) -> Callable[[], None]:
        """Subscribe to theme changes; returns the unsubscribe callable."""
        return self.theme_repository.watch(listener)
