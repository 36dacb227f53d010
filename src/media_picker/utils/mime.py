"""MIME type helpers for classifying media files."""

import mimetypes
from pathlib import Path
from typing import Optional

# File type constants
IMAGE_MIME_TYPES = {
    'image/jpeg', 'image/png', 'image/gif', 'image/bmp', 'image/webp',
    'image/heic', 'image/heif',
}
VIDEO_MIME_TYPES = {
    'video/mpeg', 'video/mp4', 'video/quicktime', 'video/3gpp', 'video/3gpp2',
    'video/x-matroska', 'video/webm', 'video/mp2ts', 'video/avi', 'video/x-msvideo',
}
ALL_MIME_TYPES = IMAGE_MIME_TYPES | VIDEO_MIME_TYPES

# Extensions the stdlib registry does not know on every platform
_EXTRA_TYPES = {
    '.heic': 'image/heic',
    '.heif': 'image/heif',
    '.webp': 'image/webp',
    '.mkv': 'video/x-matroska',
    '.webm': 'video/webm',
    '.3gp': 'video/3gpp',
    '.ts': 'video/mp2ts',
}


def get_content_type(file_path: str) -> Optional[str]:
    """Determine the MIME type of a file from its name.

    Args:
        file_path: Path to file

    Returns:
        MIME type string, or None if it cannot be guessed
    """
    ext = Path(file_path).suffix.lower()
    if ext in _EXTRA_TYPES:
        return _EXTRA_TYPES[ext]
    mime_type, _ = mimetypes.guess_type(file_path)
    return mime_type


def get_media_type(file_path: str) -> Optional[str]:
    """Get media type category from file path.

    Args:
        file_path: Path to check

    Returns:
        'image', 'video', or None
    """
    mime_type = get_content_type(file_path)
    if not mime_type:
        return None

    if mime_type.startswith('image/'):
        return 'image'
    elif mime_type.startswith('video/'):
        return 'video'

    return None
