"""Picker session: owns one selection for one picker screen."""

import logging
from typing import Any, Dict, Iterable, Optional

from ..interfaces import AcceptabilityPolicy, PathResolver
from ..models.media_item import MediaItem
from ..models.selection_state import IncapableCause
from ..storage.interface import SnapshotStore
from .collection import SelectionCollection
from .spec import SelectionSpec


logger = logging.getLogger(__name__)


class PickerSession:
    """Drives a SelectionCollection the way a picker screen does.

    Restores the previous selection on start, turns checkbox clicks into
    add/remove calls guarded by the acceptability check, and persists the
    selection on save.
    """

    def __init__(
        self,
        spec: SelectionSpec,
        path_resolver: PathResolver,
        store: Optional[SnapshotStore] = None,
        key: str = "default",
        policy: Optional[AcceptabilityPolicy] = None,
    ):
        self.store = store
        self.key = key
        self.collection = SelectionCollection(spec, path_resolver, policy)

    async def start(self, default_selection: Optional[Iterable[MediaItem]] = None) -> None:
        """Restore the persisted selection, or seed the defaults if there is none."""
        snapshot = await self.store.load(self.key) if self.store else None
        self.collection.restore(snapshot)

        if snapshot is None and default_selection:
            self.collection.set_default_selection(default_selection)

        logger.info(f"Picker session {self.key} started with {self.collection.count()} items")

    def toggle(self, item: MediaItem) -> Optional[IncapableCause]:
        """Handle a click on an item's checkbox.

        Returns:
            The rejection cause if the item could not be selected,
            otherwise None
        """
        if self.collection.contains(item):
            self.collection.remove(item)
            return None

        # A restored selection can already exceed a lowered limit
        if self.collection.count() >= self.collection.spec.max_selectable:
            return self.collection.max_count_cause()

        cause = self.collection.is_acceptable(item)
        if cause is not None:
            return cause

        self.collection.add(item)
        return None

    def checked_num_of(self, item: MediaItem) -> int:
        return self.collection.position_of(item)

    async def save(self) -> None:
        if self.store is None:
            return
        await self.store.save(self.key, self.collection.to_snapshot())

    async def discard(self) -> None:
        """Forget the persisted selection and clear the live one."""
        if self.store is not None:
            await self.store.delete(self.key)
        self.collection.clear()

    def result(self) -> Dict[str, Any]:
        """What the picker hands back to its caller on confirm."""
        return {
            "uris": self.collection.as_uri_list(),
            "paths": self.collection.as_path_list(),
            "items": self.collection.as_identity_list(include_external_defaults=True),
        }
