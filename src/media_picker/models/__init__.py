"""
Data models for Media Picker.

This module provides Pydantic models for type safety and validation
throughout the application.
"""

from .media_item import (
    MediaItem,
    MediaType,
)
from .selection_state import (
    CollectionType,
    SelectionSnapshot,
    IncapableCause,
    CauseForm,
    STATE_SELECTION,
    STATE_COLLECTION_TYPE,
)

__all__ = [
    # Media Items
    "MediaItem",
    "MediaType",
    # Selection State
    "CollectionType",
    "SelectionSnapshot",
    "IncapableCause",
    "CauseForm",
    "STATE_SELECTION",
    "STATE_COLLECTION_TYPE",
]
