"""Collaborator interfaces consumed by the selection engine."""

from abc import ABC, abstractmethod
from typing import Optional

from .models.media_item import MediaItem
from .models.selection_state import IncapableCause


class PathResolver(ABC):
    """Maps a media item to a local filesystem path."""

    @abstractmethod
    def resolve_path(self, item: MediaItem) -> Optional[str]:
        """Resolve the filesystem path backing an item.

        Args:
            item: Media item to resolve

        Returns:
            Absolute or storage-relative path, or None if the item has no
            local file

        Raises:
            StorageError: If the item points outside the allowed location
        """
        pass


class AcceptabilityPolicy(ABC):
    """Decides whether an item may be selected, independent of count limits."""

    @abstractmethod
    def evaluate(self, item: MediaItem) -> Optional[IncapableCause]:
        """Evaluate a single item.

        Args:
            item: Candidate item

        Returns:
            None if the item is acceptable, otherwise the rejection cause
        """
        pass
