"""Selection tracking for the media picker."""

from .spec import SelectionSpec
from .collection import SelectionCollection, UNCHECKED
from .session import PickerSession

__all__ = ["SelectionSpec", "SelectionCollection", "UNCHECKED", "PickerSession"]
