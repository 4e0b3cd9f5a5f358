"""Object storage infrastructure providers."""

from dishka import Scope, provide

from worldnews.adapter.storage import FilesystemObjectStorage
from worldnews.config import Settings
from worldnews.domain.service import ObjectStorage
from worldnews.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Object storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the local media bucket."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_object_storage(self, settings: Settings) -> ObjectStorage:
        """Provide the image bucket."""
        return FilesystemObjectStorage(
            root=settings.storage.root,
            public_base_url=f"{settings.api.base_url}{settings.storage.public_path}",
        )
