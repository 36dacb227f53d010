"""
Unit tests for data models.

Tests Pydantic model validation, item identity,
and snapshot serialization.
"""

import pytest
from pydantic import ValidationError

from media_picker.models import (
    # Media Items
    MediaItem,
    MediaType,
    # Selection State
    CollectionType,
    SelectionSnapshot,
    IncapableCause,
    CauseForm,
)


class TestMediaItem:
    """Test MediaItem model."""

    def test_create_image_item(self):
        """Test creating an image media item."""
        item = MediaItem(id="101", type=MediaType.IMAGE, mime_type="image/jpeg", size=2048)

        assert item.id == "101"
        assert item.type == "image"
        assert item.is_image
        assert not item.is_video
        assert item.content_uri == "content://media/external/images/media/101"

    def test_create_video_item(self):
        """Test creating a video media item."""
        item = MediaItem(id="202", type=MediaType.VIDEO, mime_type="video/mp4", duration=12.5)

        assert item.is_video
        assert item.duration == 12.5
        assert item.content_uri == "content://media/external/video/media/202"

    def test_mime_type_normalized(self):
        """Test MIME types are lower-cased."""
        item = MediaItem(id="1", type=MediaType.IMAGE, mime_type="IMAGE/GIF")
        assert item.mime_type == "image/gif"
        assert item.is_gif

    def test_equality_by_asset(self):
        """Test items are equal when they point at the same asset."""
        a = MediaItem(id="7", type=MediaType.IMAGE, size=10)
        b = MediaItem(id="7", type=MediaType.IMAGE, size=99, display_name="other.jpg")

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_same_id_different_kind_differs(self):
        """Test an image and a video with the same id are distinct."""
        image = MediaItem(id="7", type=MediaType.IMAGE)
        video = MediaItem(id="7", type=MediaType.VIDEO)

        assert image != video

    def test_item_is_frozen(self):
        """Test items cannot be mutated."""
        item = MediaItem(id="1", type=MediaType.IMAGE)
        with pytest.raises(ValidationError):
            item.id = "2"

    def test_invalid_fields(self):
        """Test field validation."""
        with pytest.raises(ValidationError):
            MediaItem(id="", type=MediaType.IMAGE)
        with pytest.raises(ValidationError):
            MediaItem(id="1", type="audio")
        with pytest.raises(ValidationError):
            MediaItem(id="1", type=MediaType.IMAGE, size=-1)

    def test_from_file(self, tmp_path):
        """Test building an item from a file on disk."""
        photo = tmp_path / "beach.jpg"
        photo.write_bytes(b"\xff\xd8\xff" + b"\x00" * 97)

        item = MediaItem.from_file(str(photo))

        assert item.is_image
        assert item.mime_type == "image/jpeg"
        assert item.size == 100
        assert item.display_name == "beach.jpg"
        assert item == MediaItem.from_file(str(photo))

    def test_from_file_video_without_file(self):
        """Test a missing video file still classifies by name."""
        item = MediaItem.from_file("/nowhere/clip.mp4", id="abc")

        assert item.id == "abc"
        assert item.is_video
        assert item.size == 0

    def test_from_file_rejects_other_types(self):
        """Test non-media files are refused."""
        with pytest.raises(ValueError, match="Not an image or video"):
            MediaItem.from_file("notes.txt")
        with pytest.raises(ValueError):
            MediaItem.from_file("song.mp3")


class TestSelectionSnapshot:
    """Test SelectionSnapshot model."""

    def test_collection_type_values(self):
        """Test persisted integer values of the collection type."""
        assert CollectionType.UNDEFINED == 0
        assert CollectionType.IMAGE == 1
        assert CollectionType.VIDEO == 2
        assert CollectionType.MIXED == 3
        assert CollectionType.MIXED == CollectionType.IMAGE | CollectionType.VIDEO

    def test_to_bundle(self):
        """Test serialization keys and values."""
        snapshot = SelectionSnapshot(
            selection=[
                MediaItem(id="1", type=MediaType.IMAGE),
                MediaItem(id="2", type=MediaType.VIDEO),
            ],
            collection_type=CollectionType.MIXED,
        )

        bundle = snapshot.to_bundle()

        assert set(bundle) == {"selection", "collection_type"}
        assert bundle["collection_type"] == 3
        assert [entry["id"] for entry in bundle["selection"]] == ["1", "2"]
        assert bundle["selection"][1]["type"] == "video"

    def test_from_bundle(self):
        """Test rebuilding from a bundle."""
        bundle = {
            "selection": [{"id": "1", "type": "image"}, {"id": "2", "type": "image"}],
            "collection_type": 1,
        }

        snapshot = SelectionSnapshot.from_bundle(bundle)

        assert snapshot.collection_type == CollectionType.IMAGE
        assert [item.id for item in snapshot.selection] == ["1", "2"]

    def test_from_bundle_defaults(self):
        """Test missing keys fall back to an empty, undefined snapshot."""
        snapshot = SelectionSnapshot.from_bundle({})

        assert snapshot.selection == []
        assert snapshot.collection_type == CollectionType.UNDEFINED

    def test_from_bundle_keeps_inconsistent_type(self):
        """Test the stored type is not checked against the stored members."""
        bundle = {"selection": [{"id": "1", "type": "image"}], "collection_type": 2}

        assert SelectionSnapshot.from_bundle(bundle).collection_type == CollectionType.VIDEO

    def test_from_bundle_invalid_type(self):
        """Test unknown collection type values are rejected."""
        with pytest.raises(ValidationError):
            SelectionSnapshot.from_bundle({"selection": [], "collection_type": 7})


class TestIncapableCause:
    """Test IncapableCause model."""

    def test_defaults(self):
        cause = IncapableCause(message="Nope")

        assert str(cause) == "Nope"
        assert cause.form == CauseForm.TOAST
        assert cause.title is None
