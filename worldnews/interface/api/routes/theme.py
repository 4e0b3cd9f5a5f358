"""Theme routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from fastapi.responses import PlainTextResponse

from worldnews.application.usecase.auth import ResolveSessionUseCase
from worldnews.application.usecase.theme import (
    GetThemeResponse,
    GetThemeUseCase,
    UpdateThemeRequest,
    UpdateThemeResponse,
    UpdateThemeUseCase,
)
from worldnews.domain.model import ThemeUpdate
from worldnews.interface.api.session import require_session
from worldnews.interface.error import to_http_exception

router = APIRouter(prefix="/theme", tags=["theme"], route_class=DishkaRoute)


@router.get("", response_model=GetThemeResponse)
async def get_theme(get_theme_use_case: FromDishka[GetThemeUseCase]) -> GetThemeResponse:
    """Current theme settings and their derived visual effects."""
    try:
        return await get_theme_use_case.execute()
    except Exception as e:
        raise to_http_exception(e, "load theme") from e


@router.patch("", response_model=UpdateThemeResponse)
async def update_theme(
    request: ThemeUpdate,
    update_theme_use_case: FromDishka[UpdateThemeUseCase],
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateThemeResponse:
    """Change some theme settings (admin only).

    Fields left out keep their current value.

    Example:
        PATCH /theme
        {"font_size": "large"}
    """
    session = await require_session(
        auth_token, resolve_session_use_case, "change the theme"
    )
    try:
        return await update_theme_use_case.execute(
            UpdateThemeRequest(session=session, update=request)
        )
    except Exception as e:
        raise to_http_exception(e, "update theme") from e


@router.get("/css", response_class=PlainTextResponse)
async def get_theme_css(
    get_theme_use_case: FromDishka[GetThemeUseCase],
) -> PlainTextResponse:
    """The theme as a ``:root`` stylesheet."""
    try:
        result = await get_theme_use_case.execute()
    except Exception as e:
        raise to_http_exception(e, "load theme") from e
    return PlainTextResponse(result.css, media_type="text/css")
