"""Helpers for turning snapshot keys and media paths into safe file locations."""

import re
from pathlib import Path

UNSAFE_CHARS = re.compile(r'[^\w\s\-.]')
MULTIPLE_DOTS = re.compile(r'\.{2,}')
LEADING_DOTS = re.compile(r'^\.+')


def validate_file_path(path: str) -> bool:
    """Check that a snapshot key or media path stays under its root.

    Args:
        path: Relative path, joined under the snapshot directory or the
            media root by the caller

    Returns:
        False for empty, absolute, home-relative or ``..`` paths
    """
    if not path:
        return False

    p = Path(path)
    if p.is_absolute() or '..' in p.parts:
        return False

    return not str(p).startswith(('~/', '~\\'))


def sanitize_filename(filename: str) -> str:
    """Map a snapshot key to a safe file name.

    Characters other than word characters, whitespace, ``-`` and ``.``
    become ``_``, runs of dots collapse, and leading dots are dropped so a
    key never produces a hidden file.

    Args:
        filename: Snapshot key, possibly with an extension

    Returns:
        File name of at most 200 stem characters, ``unnamed`` if nothing
        usable is left
    """
    name = Path(filename).stem
    ext = Path(filename).suffix

    name = LEADING_DOTS.sub('', MULTIPLE_DOTS.sub('_', UNSAFE_CHARS.sub('_', name)))[:200]

    return f"{name or 'unnamed'}{ext}"
