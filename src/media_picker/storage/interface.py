"""Abstract snapshot storage interface for Media Picker."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.selection_state import SelectionSnapshot


class SnapshotStore(ABC):
    """Abstract store for persisted selection snapshots.

    Snapshots are addressed by a short key, typically one per picker
    screen. A snapshot only needs to survive one save/restore cycle.
    """

    @abstractmethod
    async def save(self, key: str, snapshot: SelectionSnapshot) -> None:
        """Persist a snapshot, replacing any previous one under the key.

        Raises:
            StorageError: If the snapshot cannot be written
        """
        pass

    @abstractmethod
    async def load(self, key: str) -> Optional[SelectionSnapshot]:
        """Load a snapshot.

        Returns:
            The stored snapshot, or None if nothing was saved under the key

        Raises:
            StorageError: If the stored data cannot be read or decoded
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a snapshot.

        Returns:
            True if a snapshot was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check if a snapshot is stored under the key."""
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass
