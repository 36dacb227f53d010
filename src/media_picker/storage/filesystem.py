"""Filesystem snapshot storage implementation."""

import json
import logging
from pathlib import Path
from typing import Optional
import aiofiles
import aiofiles.os
from pydantic import ValidationError

from ..models.selection_state import SelectionSnapshot
from .interface import SnapshotStore, StorageError
from .utils import validate_file_path, sanitize_filename


logger = logging.getLogger(__name__)


class FilesystemSnapshotStore(SnapshotStore):
    """Stores snapshots as JSON files under ``<base_path>/snapshots``."""

    def __init__(self, base_path: str):
        """Initialize filesystem snapshot storage.

        Args:
            base_path: Base directory for all storage operations
        """
        self.base_path = Path(base_path).resolve()
        self.snapshot_dir = self.base_path / "snapshots"
        self.snapshot_dir.mkdir(parents=True, exist_ok=True)

    def _get_snapshot_path(self, key: str) -> Path:
        """Convert a snapshot key to its JSON file path.

        Raises:
            StorageError: If the key is invalid
        """
        if not validate_file_path(key) or len(Path(key).parts) != 1:
            raise StorageError(f"Invalid snapshot key: {key}")

        abs_path = self.snapshot_dir / f"{sanitize_filename(key)}.json"

        # Ensure path is within snapshot directory
        try:
            abs_path.resolve().relative_to(self.snapshot_dir)
        except ValueError:
            raise StorageError(f"Snapshot key escapes storage directory: {key}")

        return abs_path

    async def save(self, key: str, snapshot: SelectionSnapshot) -> None:
        abs_path = self._get_snapshot_path(key)
        temp_path = abs_path.with_suffix(abs_path.suffix + '.tmp')

        try:
            # Write to temporary file first (atomic operation)
            async with aiofiles.open(temp_path, 'w', encoding='utf-8') as f:
                await f.write(json.dumps(snapshot.to_bundle(), indent=2))

            await aiofiles.os.replace(temp_path, abs_path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            logger.error(f"Failed to save snapshot {key}: {e}")
            raise StorageError(f"Failed to save snapshot: {e}")

        logger.debug(f"Saved snapshot {key} ({len(snapshot.selection)} items)")

    async def load(self, key: str) -> Optional[SelectionSnapshot]:
        abs_path = self._get_snapshot_path(key)

        if not abs_path.exists():
            return None

        try:
            async with aiofiles.open(abs_path, 'r', encoding='utf-8') as f:
                data = json.loads(await f.read())
            return SelectionSnapshot.from_bundle(data)
        except (OSError, ValueError, AttributeError, ValidationError) as e:
            logger.error(f"Failed to load snapshot {key}: {e}")
            raise StorageError(f"Failed to load snapshot: {e}")

    async def delete(self, key: str) -> bool:
        abs_path = self._get_snapshot_path(key)

        if not abs_path.exists():
            return False

        try:
            await aiofiles.os.remove(abs_path)
            return True
        except OSError as e:
            raise StorageError(f"Failed to delete snapshot: {e}")

    async def exists(self, key: str) -> bool:
        return self._get_snapshot_path(key).exists()
