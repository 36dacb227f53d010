"""Command-line interface for picking media files."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import settings
from .models.media_item import MediaItem
from .selection.session import PickerSession
from .selection.spec import SelectionSpec
from .storage.filesystem import FilesystemSnapshotStore
from .storage.interface import StorageError
from .storage.paths import FilesystemPathResolver
from .utils.logging_config import configure_logging


logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type for limits that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Toggle media files in a persisted picker selection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Select two photos and a video
  %(prog)s photo1.jpg photo2.jpg clip.mp4

  # Click photo1.jpg again to deselect it
  %(prog)s photo1.jpg

  # Start over with a different limit
  %(prog)s --reset --max 3 *.jpg
        """
    )

    parser.add_argument(
        'media_files',
        nargs='*',
        help='Media files to toggle, in click order'
    )

    parser.add_argument(
        '-k', '--key',
        default='default',
        help='Name of the persisted selection (default: default)'
    )

    parser.add_argument(
        '--max',
        type=positive_int,
        default=settings.max_selectable,
        help=f'Maximum number of selected items (default: {settings.max_selectable})'
    )

    parser.add_argument(
        '--state-path',
        default=settings.state_path,
        help=f'Directory for persisted selections (default: {settings.state_path})'
    )

    parser.add_argument(
        '--reset',
        action='store_true',
        help='Discard the persisted selection before toggling'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


async def run(args) -> int:
    spec = SelectionSpec.from_settings(settings.model_copy(update={"max_selectable": args.max}))
    session = PickerSession(
        spec,
        FilesystemPathResolver(settings.media_root),
        store=FilesystemSnapshotStore(args.state_path),
        key=args.key,
    )

    await session.start()
    if args.reset:
        await session.discard()

    for media_file in args.media_files:
        try:
            item = MediaItem.from_file(str(Path(media_file).resolve()))
        except (ValueError, OSError) as e:
            print(f"Skipping {media_file}: {e}", file=sys.stderr)
            continue

        cause = session.toggle(item)
        if cause is not None:
            print(f"Cannot select {media_file}: {cause}", file=sys.stderr)

    await session.save()

    result = session.result()
    print(json.dumps({
        "collection_type": session.collection.collection_type().name.lower(),
        "count": session.collection.count(),
        "uris": result["uris"],
        "paths": result["paths"],
    }, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    # stdout carries the JSON result
    configure_logging("DEBUG" if args.verbose else settings.effective_log_level(), stream=sys.stderr)

    try:
        return asyncio.run(run(args))
    except StorageError as e:
        logger.error(f"Storage failure: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
