"""Default acceptability policy: MIME type check followed by the selection spec's filters."""

import logging
from typing import TYPE_CHECKING, Optional

from ..interfaces import AcceptabilityPolicy
from ..models.media_item import MediaItem
from ..models.selection_state import IncapableCause
from ..utils.mime import get_content_type

if TYPE_CHECKING:
    from ..selection.spec import SelectionSpec


logger = logging.getLogger(__name__)


class MediaAcceptabilityPolicy(AcceptabilityPolicy):
    """Checks an item against the selectable MIME types and the selection spec's filters."""

    def __init__(self, spec: "SelectionSpec"):
        self.spec = spec

    def is_selectable_type(self, item: MediaItem) -> bool:
        """Whether the item's MIME type is one the picker allows.

        Items whose MIME type cannot be determined are allowed.
        """
        mime_type = item.mime_type
        if mime_type is None and item.file_path:
            mime_type = get_content_type(item.file_path)
        if mime_type is None:
            return True
        return mime_type in self.spec.mime_types

    def evaluate(self, item: MediaItem) -> Optional[IncapableCause]:
        if not self.is_selectable_type(item):
            logger.info(f"Rejected {item.content_uri}: unsupported type {item.mime_type}")
            return IncapableCause(message="Unsupported file type")

        for item_filter in self.spec.filters:
            if not item_filter.needs_filtering(item):
                continue
            cause = item_filter.filter(item)
            if cause is not None:
                logger.info(f"Rejected {item.content_uri} by {type(item_filter).__name__}: {cause.message}")
                return cause

        return None
