"""Logging setup shared by the CLI and the web backend.

Library modules only create ``logging.getLogger(__name__)`` loggers; this
module attaches a single stream handler to the ``book_builder`` logger.
Calling :func:`configure_logging` again only adjusts the level.

``BOOK_BUILDER_LOG_LEVEL``
    Level name (``DEBUG``, ``INFO``, ...) used when no level is passed.
"""

from __future__ import annotations

import logging
import os

_LOG_LEVEL_ENV = "BOOK_BUILDER_LOG_LEVEL"
_LOGGER_NAME = "book_builder"
_HANDLER_TAG = "_book_builder_handler"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.environ.get(_LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(level: int | str | None = None) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(_resolve_level(level))
    if not any(getattr(h, _HANDLER_TAG, False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)
    return logger
