"""Selection spec: the read-only configuration a picker session runs with."""

from typing import TYPE_CHECKING, List, Optional, Set
from pydantic import BaseModel, Field

from ..models.media_item import MediaItem, MediaType
from ..policy.filters import Filter, MaxSizeFilter, MinDimensionFilter, VideoDurationFilter
from ..utils.mime import ALL_MIME_TYPES

if TYPE_CHECKING:
    from ..config import Settings


class SelectionSpec(BaseModel):
    """Limits and defaults for one picker session."""
    max_selectable: int = Field(9, ge=1, description="Maximum number of items that can be selected")
    pre_existing_selection: List[MediaItem] = Field(
        default_factory=list, description="Items already selected before the session started"
    )
    mime_types: Set[str] = Field(
        default_factory=lambda: set(ALL_MIME_TYPES), description="Selectable MIME types"
    )
    filters: List[Filter] = Field(default_factory=list, description="Per-item acceptability filters")

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        pre_existing_selection: Optional[List[MediaItem]] = None,
    ) -> "SelectionSpec":
        """Build a spec from application settings.

        Args:
            settings: Application settings
            pre_existing_selection: Items selected before this session

        Returns:
            SelectionSpec with the filters the settings enable
        """
        filters: List[Filter] = []
        if settings.max_image_size:
            filters.append(MaxSizeFilter(settings.max_image_size, [MediaType.IMAGE]))
        if settings.max_video_size:
            filters.append(MaxSizeFilter(settings.max_video_size, [MediaType.VIDEO]))
        if settings.max_video_duration:
            filters.append(VideoDurationFilter(settings.max_video_duration))
        if settings.min_image_width or settings.min_image_height:
            filters.append(MinDimensionFilter(settings.min_image_width, settings.min_image_height))

        return cls(
            max_selectable=settings.max_selectable,
            pre_existing_selection=pre_existing_selection or [],
            filters=filters,
        )

    class Config:
        """Pydantic configuration."""
        arbitrary_types_allowed = True
