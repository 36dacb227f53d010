"""Storage module for Media Picker.

This module provides filesystem storage for persisted selection
snapshots and path resolution for picked media.
"""

from .interface import SnapshotStore, StorageError
from .filesystem import FilesystemSnapshotStore
from .paths import FilesystemPathResolver

__all__ = ["SnapshotStore", "StorageError", "FilesystemSnapshotStore", "FilesystemPathResolver"]
