"""Post image handling.

Images arrive either as an http(s) URL, stored as-is, or as an inline
``data:`` URL, which is decoded, size-checked and uploaded to object
storage. Oversized or malformed images are rejected before storage is
touched.
"""

import base64
import binascii
import mimetypes
import re
import time
from abc import ABC, abstractmethod
from urllib.parse import urlparse

import logfire

from worldnews.domain.error import ImageTooLargeError, InvalidImageError
from worldnews.domain.value import UserId

from .base import Service

_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.S)
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class ObjectStorage(ABC):
    """Object storage bucket for uploaded files."""

    @abstractmethod
    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """Store an object.

        Args:
            path: Object key inside the bucket
            data: Object bytes
            content_type: MIME type of the object

        Returns:
            Public URL of the stored object
        """
        raise NotImplementedError


class ImageService(Service):
    """Domain service turning submitted images into stored image URLs."""

    def __init__(self, storage: ObjectStorage, max_image_bytes: int) -> None:
        """Initialize image service.

        Args:
            storage: Object storage for uploads
            max_image_bytes: Largest accepted decoded image size
        """
        self.storage = storage
        self.max_image_bytes = max_image_bytes

    def check_size(self, size: int) -> None:
        """Raises ImageTooLargeError if size exceeds the limit."""
        if size > self.max_image_bytes:
            raise ImageTooLargeError(size, self.max_image_bytes)

    async def resolve(
        self, image: str, user_id: UserId, filename: str | None = None
    ) -> str:
        """Return the URL to persist for a submitted image.

        Args:
            image: http(s) URL or base64 ``data:`` URL
            user_id: Uploading user, used in the object key
            filename: Original file name, if known

        Returns:
            Image URL

        Raises:
            ImageTooLargeError: If the decoded image exceeds the limit
            InvalidImageError: If the image is neither form or not an image
        """
        image = image.strip()
        match = _DATA_URL.match(image)
        if match is None:
            return self._check_url(image)

        with logfire.span(
            "image_service.resolve", user_id=str(user_id), mime=match["mime"]
        ):
            mime = match["mime"].lower()
            if not mime.startswith("image/"):
                raise InvalidImageError(f"Unsupported image type: {mime}")

            encoded = match["data"]
            # Reject on the encoded length first so huge payloads are never decoded
            self.check_size(len(encoded) * 3 // 4 - encoded.count("=", -2))
            try:
                data = base64.b64decode(encoded, validate=True)
            except (binascii.Error, ValueError) as e:
                raise InvalidImageError("Image data is not valid base64") from e
            self.check_size(len(data))

            path = self.object_key(user_id, filename or self._default_filename(mime))
            url = await self.storage.upload(path, data, mime)
            logfire.info("Image uploaded", path=path, size=len(data))
            return url

    @staticmethod
    def object_key(user_id: UserId, filename: str) -> str:
        """Object key for an upload: posts/{user_id}/{timestamp_ms}_{filename}."""
        safe_name = _UNSAFE_FILENAME_CHARS.sub("_", filename).strip("._") or "image"
        timestamp = int(time.time() * 1000)
        return f"posts/{user_id}/{timestamp}_{safe_name}"

    @staticmethod
    def _default_filename(mime: str) -> str:
        extension = mimetypes.guess_extension(mime) or ""
        return f"image{extension}"

    @staticmethod
    def _check_url(image: str) -> str:
        parsed = urlparse(image)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise InvalidImageError("Image must be an http(s) URL or an image data URL")
        return image
