"""Session event log (``log.txt`` by default).

One line per producer enqueue. The file is truncated at session start.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "mathrush.events"


def open_event_log(path: Path) -> logging.Logger:
    """Create (or truncate) the event log file and return a logger writing to it.

    Raises:
        OSError: if the file cannot be created.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    close_event_log(logger)
    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    # Keep event lines out of the console/root handlers
    logger.propagate = False
    return logger


def close_event_log(logger: logging.Logger) -> None:
    """Flush and detach every handler from the event logger."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
