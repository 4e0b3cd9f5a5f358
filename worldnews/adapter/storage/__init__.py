"""Object storage adapters."""

from .client import FilesystemObjectStorage, MockObjectStorage

__all__ = ["FilesystemObjectStorage", "MockObjectStorage"]
