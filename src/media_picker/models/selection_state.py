"""
Selection state data models.

Classification of a selection's content, the detached snapshot used to
persist and hand over a selection, and the cause returned when an item
cannot be selected.
"""

from enum import Enum, IntEnum
from typing import Any, Dict, List, Mapping, Optional
from pydantic import BaseModel, Field

from .media_item import MediaItem


STATE_SELECTION = "selection"
STATE_COLLECTION_TYPE = "collection_type"


class CollectionType(IntEnum):
    """Content classification of a selection."""
    UNDEFINED = 0x00  # Empty selection
    IMAGE = 0x01  # Images only
    VIDEO = 0x01 << 1  # Videos only
    MIXED = IMAGE | VIDEO  # Images and videos


class SelectionSnapshot(BaseModel):
    """Detached, serializable copy of a selection."""
    selection: List[MediaItem] = Field(default_factory=list, description="Members in insertion order")
    collection_type: CollectionType = Field(CollectionType.UNDEFINED, description="Classification at snapshot time")

    def to_bundle(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible key/value bag."""
        return {
            STATE_SELECTION: [item.model_dump(mode="json") for item in self.selection],
            STATE_COLLECTION_TYPE: int(self.collection_type),
        }

    @classmethod
    def from_bundle(cls, bundle: Mapping[str, Any]) -> "SelectionSnapshot":
        """Rebuild a snapshot from a key/value bag.

        The stored type is taken as is, even if it disagrees with the
        stored members.
        """
        return cls(
            selection=bundle.get(STATE_SELECTION) or [],
            collection_type=bundle.get(STATE_COLLECTION_TYPE, CollectionType.UNDEFINED),
        )


class CauseForm(str, Enum):
    """How the UI should surface a rejection."""
    TOAST = "toast"
    DIALOG = "dialog"
    NONE = "none"


class IncapableCause(BaseModel):
    """Why an item cannot be selected."""
    message: str = Field(..., description="Human readable reason")
    title: Optional[str] = Field(None, description="Dialog title, if shown as a dialog")
    form: CauseForm = Field(CauseForm.TOAST, description="Presentation hint")

    def __str__(self) -> str:
        return self.message
