"""
Media item data models.

Defines the identity of a single photo or video that can be picked,
together with the metadata the acceptability filters look at.
"""

import uuid
from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, validator

from ..utils.mime import get_content_type, get_media_type


CONTENT_URI_BASE = "content://media/external"


class MediaType(str, Enum):
    """Kinds of media that can be picked."""
    IMAGE = "image"
    VIDEO = "video"


class MediaItem(BaseModel):
    """A single pickable media asset.

    Two items are the same item when they point at the same asset, which
    is what ``content_uri`` encodes. Metadata such as size or duration
    does not take part in equality.
    """
    id: str = Field(..., min_length=1, description="Asset identifier in the media store")
    type: MediaType = Field(..., description="Image or video")
    mime_type: Optional[str] = Field(None, description="MIME type, e.g. image/jpeg")
    file_path: Optional[str] = Field(None, description="Local file backing the asset")
    display_name: Optional[str] = Field(None, description="Name shown in the picker")
    size: int = Field(0, ge=0, description="File size in bytes")
    duration: Optional[float] = Field(None, ge=0, description="Video duration in seconds")
    width: Optional[int] = Field(None, ge=0, description="Pixel width")
    height: Optional[int] = Field(None, ge=0, description="Pixel height")

    @validator('mime_type')
    def normalize_mime_type(cls, v):
        return v.lower() if v else v

    @property
    def is_image(self) -> bool:
        return self.type == MediaType.IMAGE

    @property
    def is_video(self) -> bool:
        return self.type == MediaType.VIDEO

    @property
    def is_gif(self) -> bool:
        return self.mime_type == "image/gif"

    @property
    def content_uri(self) -> str:
        """URI of the asset in the media store."""
        collection = "images" if self.is_image else "video"
        return f"{CONTENT_URI_BASE}/{collection}/media/{self.id}"

    @classmethod
    def from_file(cls, path: str, id: Optional[str] = None) -> "MediaItem":
        """Build an item for a local image or video file.

        Args:
            path: Path to the media file
            id: Asset identifier; derived from the resolved path when omitted

        Returns:
            MediaItem describing the file

        Raises:
            ValueError: If the file is neither an image nor a video
        """
        media_type = get_media_type(path)
        if media_type is None:
            raise ValueError(f"Not an image or video file: {path}")

        file_path = Path(path)
        if id is None:
            id = uuid.uuid5(uuid.NAMESPACE_URL, file_path.resolve().as_uri()).hex

        return cls(
            id=id,
            type=MediaType(media_type),
            mime_type=get_content_type(path),
            file_path=str(file_path),
            display_name=file_path.name,
            size=file_path.stat().st_size if file_path.is_file() else 0,
        )

    def __eq__(self, other):
        if not isinstance(other, MediaItem):
            return NotImplemented
        return self.content_uri == other.content_uri

    def __hash__(self):
        return hash(self.content_uri)

    class Config:
        """Pydantic configuration."""
        frozen = True
        use_enum_values = True
