"""
Selected item collection.

Ordered, duplicate-free set of picked media items together with the
classification of its content (nothing, images only, videos only, mixed).
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, MutableMapping, Optional, Union

from ..interfaces import AcceptabilityPolicy, PathResolver
from ..models.media_item import MediaItem
from ..models.selection_state import CollectionType, IncapableCause, SelectionSnapshot
from ..policy.acceptability import MediaAcceptabilityPolicy
from .spec import SelectionSpec


logger = logging.getLogger(__name__)

# Position reported for items that are not selected; positions start at 1
UNCHECKED = 0


class SelectionCollection:
    """Tracks the items picked in one picker session.

    Membership is kept in a dict used as an insertion-ordered set, so
    add/remove/contains are O(1) and iteration follows selection order.
    The collection type is updated on every mutation so it always matches
    membership, with the exception of ``restore`` and ``overwrite`` which
    trust the type they are given.

    Not thread-safe; meant to be owned by a single session.
    """

    def __init__(
        self,
        spec: SelectionSpec,
        path_resolver: PathResolver,
        policy: Optional[AcceptabilityPolicy] = None,
    ):
        """Initialize an empty collection.

        Args:
            spec: Limits and pre-existing selection for this session
            path_resolver: Maps items to local filesystem paths
            policy: Per-item acceptability policy, defaults to
                MediaAcceptabilityPolicy(spec)
        """
        self.spec = spec
        self.path_resolver = path_resolver
        self.policy = policy or MediaAcceptabilityPolicy(spec)
        self._items: Dict[MediaItem, None] = {}
        self._collection_type = CollectionType.UNDEFINED

    # Initialization

    def restore(self, snapshot: Optional[Union[SelectionSnapshot, Mapping[str, Any]]] = None) -> None:
        """Start empty or hydrate from a previously saved snapshot.

        The saved collection type is used verbatim; it is not checked
        against the saved members.
        """
        if snapshot is None:
            self._items = {}
            self._collection_type = CollectionType.UNDEFINED
            return

        if not isinstance(snapshot, SelectionSnapshot):
            snapshot = SelectionSnapshot.from_bundle(snapshot)

        self._items = dict.fromkeys(snapshot.selection)
        self._collection_type = CollectionType(snapshot.collection_type)
        logger.debug(f"Restored {len(self._items)} items, type {self._collection_type.name}")

    def set_default_selection(self, items: Iterable[MediaItem]) -> None:
        """Seed the selection before any interactive change.

        The collection type is not updated here.
        """
        for item in items:
            self._items.setdefault(item, None)

    # Snapshot

    def to_snapshot(self) -> SelectionSnapshot:
        """Independent copy of current membership and type."""
        return SelectionSnapshot(
            selection=list(self._items),
            collection_type=self._collection_type,
        )

    def save_state(self, out_state: MutableMapping[str, Any]) -> None:
        """Write the snapshot keys into a caller-owned state mapping."""
        out_state.update(self.to_snapshot().to_bundle())

    # Mutation

    def add(self, item: MediaItem) -> bool:
        """Append an item. Returns False if it was already selected."""
        if item in self._items:
            return False

        self._items[item] = None
        if self._collection_type == CollectionType.UNDEFINED:
            if item.is_image:
                self._collection_type = CollectionType.IMAGE
            elif item.is_video:
                self._collection_type = CollectionType.VIDEO
        elif self._collection_type == CollectionType.IMAGE:
            if item.is_video:
                self._collection_type = CollectionType.MIXED
        elif self._collection_type == CollectionType.VIDEO:
            if item.is_image:
                self._collection_type = CollectionType.MIXED

        logger.debug(f"Added {item.content_uri} ({len(self._items)} selected, {self._collection_type.name})")
        return True

    def remove(self, item: MediaItem) -> bool:
        """Remove an item. Returns False if it was not selected."""
        if item not in self._items:
            return False

        del self._items[item]
        if not self._items:
            self._collection_type = CollectionType.UNDEFINED
        elif self._collection_type == CollectionType.MIXED:
            self._refine_collection_type()

        logger.debug(f"Removed {item.content_uri} ({len(self._items)} selected, {self._collection_type.name})")
        return True

    def overwrite(self, items: Iterable[MediaItem], collection_type: Optional[CollectionType] = None) -> None:
        """Replace the whole selection.

        The given collection type is trusted without checking it against
        ``items``; an empty ``items`` always yields UNDEFINED. Without a
        type, the current type is left as is and keeping it consistent is
        up to the caller.

        Raises:
            ValueError: If collection_type is not a CollectionType value
                (an int outside 0-3)
        """
        if collection_type is not None:
            collection_type = CollectionType(collection_type)
        self._items = dict.fromkeys(items)
        if collection_type is not None:
            if not self._items:
                self._collection_type = CollectionType.UNDEFINED
            else:
                self._collection_type = collection_type

    def clear(self) -> None:
        self._items = {}
        self._collection_type = CollectionType.UNDEFINED

    def _refine_collection_type(self) -> None:
        has_image = False
        has_video = False
        for item in self._items:
            if item.is_image:
                has_image = True
            elif item.is_video:
                has_video = True
            if has_image and has_video:
                break

        if has_image and has_video:
            self._collection_type = CollectionType.MIXED
        elif has_image:
            self._collection_type = CollectionType.IMAGE
        elif has_video:
            self._collection_type = CollectionType.VIDEO

    # Queries

    def is_empty(self) -> bool:
        return not self._items

    def contains(self, item: MediaItem) -> bool:
        return item in self._items

    def count(self) -> int:
        return len(self._items)

    def collection_type(self) -> CollectionType:
        return self._collection_type

    def position_of(self, item: MediaItem) -> int:
        """1-based selection order of an item, or UNCHECKED."""
        for position, member in enumerate(self._items, start=1):
            if member == item:
                return position
        return UNCHECKED

    def as_identity_list(self, include_external_defaults: bool = False) -> List[MediaItem]:
        """Selected items in order, optionally after the pre-existing selection.

        The two sources are concatenated without removing duplicates.
        """
        if include_external_defaults:
            return list(self.spec.pre_existing_selection) + list(self._items)
        return list(self._items)

    def as_uri_list(self) -> List[str]:
        return [item.content_uri for item in self._items]

    def as_path_list(self) -> List[Optional[str]]:
        return [self.path_resolver.resolve_path(item) for item in self._items]

    # Acceptability

    def is_acceptable(self, item: MediaItem) -> Optional[IncapableCause]:
        """Check whether an item may be added.

        Returns:
            None if acceptable, otherwise why not. The count limit is
            checked first and short-circuits the policy.
        """
        if self.is_at_max():
            return self.max_count_cause()
        return self.policy.evaluate(item)

    def max_count_cause(self) -> IncapableCause:
        return IncapableCause(
            message=f"You can only select up to {self.spec.max_selectable} media files"
        )

    def is_at_max(self) -> bool:
        return len(self._items) == self.spec.max_selectable

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[MediaItem]:
        return iter(list(self._items))
