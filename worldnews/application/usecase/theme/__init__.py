"""Theme use cases."""

from .get_theme import GetThemeResponse, GetThemeUseCase
from .update_theme import UpdateThemeRequest, UpdateThemeResponse, UpdateThemeUseCase

__all__ = [
    "GetThemeResponse",
    "GetThemeUseCase",
    "UpdateThemeRequest",
    "UpdateThemeResponse",
    "UpdateThemeUseCase",
]
