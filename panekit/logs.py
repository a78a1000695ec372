"""Error and developer-hint reporting through the standard logging module."""

from __future__ import annotations

import inspect
import logging

logger = logging.getLogger("panekit")


def _location(depth: int) -> tuple[str, int] | None:
    """Return the file and line of the frame ``depth`` levels above the caller."""
    frame = inspect.currentframe()
    try:
        # Skip this helper itself plus the reporting function that called it.
        for _ in range(depth + 2):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


def log_error(reason: str, err: BaseException | None = None) -> None:
    """Report an error, its cause if any, and the code location of the caller."""
    logger.error("panekit error: %s", reason)
    if err is not None:
        logger.error("  Cause: %s", err)

    location = _location(0)
    if location is not None:
        logger.error("  At: %s:%d", *location)


def log_hint(reason: str, enabled: bool = False) -> None:
    """Report a developer hint, with where the hinted object was created.

    Nothing is logged unless ``enabled`` is true.
    """
    if not enabled:
        return

    logger.info("panekit hint: %s", reason)
    location = _location(1)
    if location is not None:
        logger.info("  Created at: %s:%d", *location)