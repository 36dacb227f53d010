"""Per-item filters applied before an item may be selected."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Set

from ..models.media_item import MediaItem, MediaType
from ..models.selection_state import CauseForm, IncapableCause


class Filter(ABC):
    """A single acceptability rule.

    A filter only looks at items whose kind is in ``constraint_types()``;
    everything else passes it untouched.
    """

    @abstractmethod
    def constraint_types(self) -> Set[MediaType]:
        """Media kinds this filter applies to."""
        pass

    @abstractmethod
    def filter(self, item: MediaItem) -> Optional[IncapableCause]:
        """Check an item.

        Args:
            item: Item that needs filtering

        Returns:
            None if the item passes, otherwise the rejection cause
        """
        pass

    def needs_filtering(self, item: MediaItem) -> bool:
        return MediaType(item.type) in self.constraint_types()


def _format_bytes(size: int) -> str:
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{size:g} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


class MaxSizeFilter(Filter):
    """Rejects files larger than a byte limit."""

    def __init__(self, max_bytes: int, constraint_types: Iterable[MediaType] = (MediaType.IMAGE, MediaType.VIDEO)):
        if max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        self.max_bytes = max_bytes
        self._types = set(constraint_types)

    def constraint_types(self) -> Set[MediaType]:
        return self._types

    def filter(self, item: MediaItem) -> Optional[IncapableCause]:
        if item.size > self.max_bytes:
            return IncapableCause(
                message=f"File is too large, the limit is {_format_bytes(self.max_bytes)}",
                form=CauseForm.DIALOG,
                title="File too large",
            )
        return None


class VideoDurationFilter(Filter):
    """Rejects videos longer than a limit. Unknown durations pass."""

    def __init__(self, max_seconds: float):
        if max_seconds <= 0:
            raise ValueError("max_seconds must be positive")
        self.max_seconds = max_seconds

    def constraint_types(self) -> Set[MediaType]:
        return {MediaType.VIDEO}

    def filter(self, item: MediaItem) -> Optional[IncapableCause]:
        if item.duration is not None and item.duration > self.max_seconds:
            return IncapableCause(message=f"Videos can be at most {self.max_seconds:g} seconds long")
        return None


class MinDimensionFilter(Filter):
    """Rejects images smaller than a minimum size. Unknown dimensions pass."""

    def __init__(self, min_width: int = 0, min_height: int = 0):
        self.min_width = min_width
        self.min_height = min_height

    def constraint_types(self) -> Set[MediaType]:
        return {MediaType.IMAGE}

    def filter(self, item: MediaItem) -> Optional[IncapableCause]:
        if item.width is None or item.height is None:
            return None
        if item.width < self.min_width or item.height < self.min_height:
            return IncapableCause(
                message=f"Image must be at least {self.min_width}x{self.min_height} pixels"
            )
        return None
