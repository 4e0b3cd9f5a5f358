"""Get theme use case."""

from pydantic import BaseModel

from worldnews.domain.model import ThemeApplication, ThemeSettings
from worldnews.domain.service import ThemeService


class GetThemeResponse(BaseModel):
    """Get theme response."""

    settings: ThemeSettings
    application: ThemeApplication
    css: str


class GetThemeUseCase:
    """Use case for reading the site theme."""

    def __init__(self, theme_service: ThemeService) -> None:
        self.theme_service = theme_service

    async def execute(self) -> GetThemeResponse:
        """Current settings with their derived effects and stylesheet."""
        settings = await self.theme_service.get_theme()
        application = ThemeApplication.from_settings(settings)
        return GetThemeResponse(
            settings=settings, application=application, css=application.to_css()
        )
