"""Update theme use case."""

from pydantic import BaseModel

from worldnews.domain.model import Session, ThemeApplication, ThemeSettings, ThemeUpdate
from worldnews.domain.service import ThemeService


class UpdateThemeRequest(BaseModel):
    """Update theme request."""

    session: Session
    update: ThemeUpdate


class UpdateThemeResponse(BaseModel):
    """Update theme response."""

    settings: ThemeSettings
    application: ThemeApplication
    css: str


class UpdateThemeUseCase:
    """Use case for changing the site theme."""

    def __init__(self, theme_service: ThemeService) -> None:
        self.theme_service = theme_service

    async def execute(self, request: UpdateThemeRequest) -> UpdateThemeResponse:
        """Merge, persist and return the applied theme (admin only).

        Raises:
            NotAuthorizedError: If the session is not an admin
        """
        application = await self.theme_service.update_theme(
            request.session, request.update
        )
        settings = await self.theme_service.get_theme()
        return UpdateThemeResponse(
            settings=settings, application=application, css=application.to_css()
        )
