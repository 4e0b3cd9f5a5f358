"""Object storage clients for uploaded images.

The production client writes objects into a local bucket directory that the
API serves as static files.
"""

import asyncio
from pathlib import Path

import logfire

from worldnews.adapter.error import StorageError
from worldnews.domain.service.image_service import ObjectStorage


class FilesystemObjectStorage(ObjectStorage):
    """Bucket backed by a directory on local disk."""

    def __init__(self, root: Path, public_base_url: str) -> None:
        """Initialize filesystem storage.

        Args:
            root: Bucket directory
            public_base_url: URL prefix the bucket is served under
        """
        self.root = root
        self.public_base_url = public_base_url.rstrip("/")

    def _target(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if not target.is_relative_to(self.root.resolve()):
            raise StorageError(f"Object key escapes the bucket: {path}")
        return target

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """Write the object to disk and return its public URL."""
        with logfire.span(
            "filesystem_storage.upload", path=path, size=len(data), content_type=content_type
        ):
            target = self._target(path)
            try:
                await asyncio.to_thread(self._write, target, data)
            except OSError as e:
                logfire.error("Object write failed", path=path, error=str(e))
                raise StorageError(f"Failed to store {path}: {e}") from e

            url = f"{self.public_base_url}/{path}"
            logfire.info("Object stored", path=path, url=url)
            return url

    @staticmethod
    def _write(target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)


class MockObjectStorage(ObjectStorage):
    """Mock storage for testing.

    Keeps uploaded objects in memory and returns deterministic URLs.
    """

    def __init__(self, base_url: str = "https://storage.test") -> None:
        self.base_url = base_url
        self.objects: dict[str, tuple[bytes, str]] = {}

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """Record the object and return a fake URL."""
        self.objects[path] = (data, content_type)
        return f"{self.base_url}/{path}"
