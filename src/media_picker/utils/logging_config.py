"""Centralized logging configuration for Media Picker."""

import logging
import sys
from typing import Optional, TextIO


def configure_logging(
    level: str = "INFO",
    format: Optional[str] = None,
    suppress_external: bool = True,
    stream: Optional[TextIO] = None
) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format: Custom format string, or None for default
        suppress_external: If True, suppress noisy external library logs
        stream: Stream to log to, defaults to stdout
    """
    # Default format: levelname | time | filename:lineno | message
    if format is None:
        format = "%(levelname)-5s | %(asctime)s | %(filename)s:%(lineno)d | %(message)s"

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format,
        datefmt="%H:%M:%S",
        stream=stream or sys.stdout,
        force=True  # Reconfigure if already configured
    )

    if suppress_external:
        for name in ("asyncio", "aiofiles"):
            logging.getLogger(name).setLevel(logging.WARNING)

