"""Unit tests for ThemeService."""

import asyncio

import pytest

from worldnews.domain.error import NotAuthorizedError
from worldnews.domain.model import Session, ThemeSettings, ThemeUpdate
from worldnews.domain.repository import ThemeRepository
from worldnews.domain.service import ThemeService
from worldnews.domain.value import FontFamily, FontSize, ImageSize
from worldnews.persistence.repository import FileThemeRepository
from tests.conftest import make_user, session_for
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.fixture
def admin():
    return session_for(make_user("root", is_admin=True))


class TestGetTheme:
    """Tests for get_theme method."""

    @pytest.mark.asyncio
    async def test_defaults_when_nothing_saved(self, unit_env):
        """An empty store yields the default theme."""
        theme_service = await unit_env.get(ThemeService)

        assert await theme_service.get_theme() == ThemeSettings()


class TestUpdateTheme:
    """Tests for update_theme method."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, unit_env, admin):
        """Only the given field changes; the rest keep their values."""
        theme_service = await unit_env.get(ThemeService)
        await theme_service.update_theme(
            admin, ThemeUpdate(primary_color="120 50% 40%")
        )

        await theme_service.update_theme(admin, ThemeUpdate(font_size=FontSize.LARGE))

        settings = await theme_service.get_theme()
        assert settings.primary_color == "120 50% 40%"
        assert settings.font_size == FontSize.LARGE
        assert settings.font_family == FontFamily.INTER

    @pytest.mark.asyncio
    async def test_application_reflects_merged_settings(self, unit_env, admin):
        """Every effect is derived from the persisted settings."""
        theme_service = await unit_env.get(ThemeService)

        application = await theme_service.update_theme(
            admin,
            ThemeUpdate(image_size=ImageSize.LARGE, font_family=FontFamily.PLAYFAIR),
        )

        assert application.attributes == {"data-image-size": "large"}
        assert application.image_height_px == 400
        assert application.css_variables["--font-sans"] == "Playfair Display, serif"
        assert application.css_variables["--primary"] == "200 100% 50%"
        assert application == await theme_service.current_application()

    @pytest.mark.asyncio
    async def test_listeners_notified_after_save(self, unit_env, admin):
        """Watchers receive the stored settings; unsubscribed ones do not."""
        theme_service = await unit_env.get(ThemeService)
        seen: list[ThemeSettings] = []
        unsubscribe = theme_service.watch(seen.append)

        await theme_service.update_theme(admin, ThemeUpdate(accent_color="0 0% 0%"))
        unsubscribe()
        await theme_service.update_theme(admin, ThemeUpdate(accent_color="1 1% 1%"))

        assert [s.accent_color for s in seen] == ["0 0% 0%"]

    @pytest.mark.asyncio
    async def test_concurrent_partial_updates_both_persist(self, admin, tmp_path):
        """Two simultaneous updates merge onto each other, not onto one base."""
        theme_service = ThemeService(FileThemeRepository(tmp_path / "theme.json"))

        first, second = await asyncio.gather(
            theme_service.update_theme(
                admin, ThemeUpdate(primary_color="120 50% 40%")
            ),
            theme_service.update_theme(admin, ThemeUpdate(font_size=FontSize.LARGE)),
        )

        settings = await theme_service.get_theme()
        assert settings.primary_color == "120 50% 40%"
        assert settings.font_size == FontSize.LARGE
        assert second == await theme_service.current_application()
        assert first.css_variables["--primary"] == "120 50% 40%"

    @pytest.mark.asyncio
    async def test_non_admin_cannot_update(self, unit_env):
        """Members and guests cannot change the theme."""
        theme_service = await unit_env.get(ThemeService)
        theme_repo = await unit_env.get(ThemeRepository)
        update = ThemeUpdate(font_size=FontSize.SMALL)

        with pytest.raises(NotAuthorizedError):
            await theme_service.update_theme(session_for(make_user("alice")), update)
        with pytest.raises(NotAuthorizedError):
            await theme_service.update_theme(Session.guest(), update)

        assert await theme_repo.load() is None
