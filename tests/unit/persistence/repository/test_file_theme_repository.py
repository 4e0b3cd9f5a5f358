"""Unit tests for FileThemeRepository."""

import asyncio
import json
import os

import pytest

from worldnews.domain.model import ThemeSettings
from worldnews.domain.value import FontSize
from worldnews.persistence.repository import FileThemeRepository


@pytest.fixture
def path(tmp_path):
    return tmp_path / "theme" / "settings.json"


@pytest.mark.asyncio
async def test_load_missing_file_returns_none(path):
    """Nothing persisted yet."""
    assert await FileThemeRepository(path).load() is None


@pytest.mark.asyncio
async def test_save_then_load_in_new_instance(path):
    """Settings survive a restart."""
    settings = ThemeSettings(primary_color="10 20% 30%", font_size=FontSize.SMALL)

    await FileThemeRepository(path).save(settings)

    assert await FileThemeRepository(path).load() == settings
    assert json.loads(path.read_text())["primary_color"] == "10 20% 30%"


@pytest.mark.asyncio
async def test_save_leaves_no_temporary_files(path):
    """The write is a rename over the target."""
    await FileThemeRepository(path).save(ThemeSettings())

    assert sorted(p.name for p in path.parent.iterdir()) == ["settings.json"]


@pytest.mark.asyncio
async def test_external_write_invalidates_cache(path):
    """A change made by another writer is picked up on the next load."""
    repo = FileThemeRepository(path)
    await repo.save(ThemeSettings())
    assert (await repo.load()).font_size == FontSize.MEDIUM

    external = ThemeSettings(font_size=FontSize.LARGE, accent_color="300 80% 45%")
    path.write_text(external.model_dump_json())
    stat = path.stat()
    # Ensure the modification stamp moves even on coarse-grained filesystems
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))

    assert await repo.load() == external


@pytest.mark.asyncio
async def test_unreadable_file_ignored(path):
    """A corrupt document reads as nothing persisted."""
    path.parent.mkdir(parents=True)
    path.write_text("{not json")

    assert await FileThemeRepository(path).load() is None


@pytest.mark.asyncio
async def test_watchers_notified_on_save(path):
    """Listeners get the new settings; a failing listener does not block others."""
    repo = FileThemeRepository(path)
    seen: list[ThemeSettings] = []

    def broken(_: ThemeSettings) -> None:
        raise RuntimeError("listener bug")

    repo.watch(broken)
    unsubscribe = repo.watch(seen.append)
    settings = ThemeSettings(font_size=FontSize.LARGE)

    await repo.save(settings)
    unsubscribe()
    await repo.save(ThemeSettings())

    assert seen == [settings]


@pytest.mark.asyncio
async def test_concurrent_updates_each_see_the_previous(path):
    """Gathered updates are applied one after the other."""
    repo = FileThemeRepository(path)

    def recolor(current):
        return (current or ThemeSettings()).model_copy(
            update={"primary_color": "120 50% 40%"}
        )

    def enlarge(current):
        return (current or ThemeSettings()).model_copy(
            update={"font_size": FontSize.LARGE}
        )

    await asyncio.gather(repo.update(recolor), repo.update(enlarge))

    stored = await FileThemeRepository(path).load()
    assert stored.primary_color == "120 50% 40%"
    assert stored.font_size == FontSize.LARGE
