import logging
import mimetypes
import os
import re
from typing import Optional
from uuid import uuid4

logger = logging.getLogger(__name__)

_SAFE_EXT = re.compile(r"^\.[a-z0-9]{1,8}$")


class StorageError(Exception):
    pass


class LocalMediaStorage:
    """
    Stores uploaded product images on local disk.
    save() returns the public URL (url_prefix + relative path), which is the
    opaque reference kept in Product.images.
    """

    folder = "products"

    def __init__(self, directory: str, url_prefix: str = "/media"):
        self.directory = directory
        self.url_prefix = url_prefix.rstrip("/")

    def ensure_ready(self) -> None:
        os.makedirs(os.path.join(self.directory, self.folder), exist_ok=True)

    def _extension(self, filename: Optional[str], content_type: Optional[str]) -> str:
        ext = os.path.splitext(filename or "")[1].lower()
        if not _SAFE_EXT.match(ext):
            ext = mimetypes.guess_extension(content_type or "") or ""
        return ext

    def save(
        self, data: bytes, filename: Optional[str] = None, content_type: Optional[str] = None
    ) -> str:
        name = f"{uuid4().hex}{self._extension(filename, content_type)}"
        path = os.path.join(self.directory, self.folder, name)
        try:
            self.ensure_ready()
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise StorageError(f"Could not store {name}: {e}") from e
        logger.info("Stored upload %s (%d bytes)", name, len(data))
        return f"{self.url_prefix}/{self.folder}/{name}"

    def health_check(self) -> bool:
        return os.path.isdir(self.directory) and os.access(self.directory, os.W_OK)
