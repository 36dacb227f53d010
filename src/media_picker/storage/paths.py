"""Resolve media items to files under a media root."""

import logging
from pathlib import Path
from typing import Optional

from ..interfaces import PathResolver
from ..models.media_item import MediaItem
from .interface import StorageError
from .utils import validate_file_path


logger = logging.getLogger(__name__)


class FilesystemPathResolver(PathResolver):
    """Resolves ``MediaItem.file_path`` against a media root directory.

    Absolute paths are returned unchanged. Relative paths are joined
    under the root and must stay inside it.
    """

    def __init__(self, base_path: str):
        self.base_path = Path(base_path).resolve()

    def resolve_path(self, item: MediaItem) -> Optional[str]:
        if not item.file_path:
            logger.debug(f"No local file for {item.content_uri}")
            return None

        path = Path(item.file_path)
        if path.is_absolute():
            return str(path)

        if not validate_file_path(item.file_path):
            raise StorageError(f"Invalid media path: {item.file_path}")

        abs_path = self.base_path / path
        try:
            abs_path.resolve().relative_to(self.base_path)
        except ValueError:
            raise StorageError(f"Media path escapes media root: {item.file_path}")

        return str(abs_path)
