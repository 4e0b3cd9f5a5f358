"""File-backed theme settings store.

The settings live in one JSON document. Writes go to a temporary file that
is then renamed over the original, so readers only ever see a complete
copy. Reads are served from memory until the file's modification stamp
changes.
"""

import asyncio
import json
import os
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Optional

import logfire
from pydantic import ValidationError

from worldnews.domain.model import ThemeSettings
from worldnews.domain.repository import ThemeRepository
from worldnews.domain.repository.theme import ThemeChange, ThemeListener

_Stamp = tuple[int, int]


class FileThemeRepository(ThemeRepository):
    """Theme store persisted to a local JSON file with an in-memory cache."""

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: JSON file holding the settings
        """
        self.path = path
        self._cached: Optional[ThemeSettings] = None
        self._stamp: Optional[_Stamp] = None
        self._listeners: list[ThemeListener] = []
        self._write_lock = asyncio.Lock()

    def _current_stamp(self) -> Optional[_Stamp]:
        try:
            stat = self.path.stat()
        except FileNotFoundError:
            return None
        return stat.st_mtime_ns, stat.st_size

    async def load(self) -> Optional[ThemeSettings]:
        """Read settings, re-reading the file only when it changed."""
        stamp = self._current_stamp()
        if stamp is None:
            self._cached, self._stamp = None, None
            return None
        if stamp == self._stamp:
            return self._cached

        with logfire.span("theme_store.load", path=str(self.path)):
            try:
                raw = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
                settings = ThemeSettings.model_validate(json.loads(raw))
            except (json.JSONDecodeError, ValidationError) as e:
                logfire.warn(
                    "Ignoring unreadable theme settings", path=str(self.path), error=str(e)
                )
                return None

            self._cached, self._stamp = settings, stamp
            logfire.info("Theme settings loaded from disk", path=str(self.path))
            return settings

    async def save(self, settings: ThemeSettings) -> None:
        """Atomically replace the stored settings and notify listeners."""
        with logfire.span("theme_store.save", path=str(self.path)):
            async with self._write_lock:
                await self._store(settings)
            self._notify(settings)

    async def update(self, change: ThemeChange) -> ThemeSettings:
        """Load, change and store under the write lock."""
        with logfire.span("theme_store.update", path=str(self.path)):
            async with self._write_lock:
                settings = change(await self.load())
                await self._store(settings)
            self._notify(settings)
            return settings

    async def _store(self, settings: ThemeSettings) -> None:
        payload = settings.model_dump_json(indent=2)
        await asyncio.to_thread(self._write_atomic, payload)
        self._cached, self._stamp = settings, self._current_stamp()

    def _notify(self, settings: ThemeSettings) -> None:
        for listener in list(self._listeners):
            try:
                listener(settings)
            except Exception as e:
                logfire.error("Theme listener failed", error=str(e))

    def _write_atomic(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def watch(self, listener: ThemeListener) -> Callable[[], None]:
        """Register a change listener."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
