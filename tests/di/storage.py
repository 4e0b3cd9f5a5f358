"""Mock object storage provider for testing."""

from dishka import Scope, provide

from worldnews.adapter.storage import MockObjectStorage
from worldnews.domain.service import ObjectStorage
from worldnews.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Keeps uploads in memory instead of writing to the bucket."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_object_storage(self) -> ObjectStorage:
        """Provide in-memory object storage."""
        return MockObjectStorage()
