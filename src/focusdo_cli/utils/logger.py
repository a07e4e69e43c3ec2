"""Rotating log file for the focusdo session.

The terminal belongs to the live display, so nothing is ever logged to
stdout or stderr; everything goes to ``focusdo.log`` under the platform's
user log directory.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "focusdo_cli"
_LOG_FILE = "focusdo.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
DEFAULT_LEVEL = "INFO"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _file_handler() -> logging.Handler:
    path = log_file_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)-7s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    return handler


def get_logger(level: str | None = None) -> logging.Logger:
    """Return the ``focusdo_cli`` logger, attaching the file handler once.

    Module loggers (``logging.getLogger(__name__)``) are its children. A
    *level* such as ``"DEBUG"`` (timer transitions and todo edits) replaces
    the current level; otherwise a new logger starts at ``INFO``.
    """
    global _logger
    if _logger is None:
        logger = logging.getLogger(_APP_NAME)
        if not logger.handlers:
            logger.addHandler(_file_handler())
        logger.propagate = False
        logger.setLevel(DEFAULT_LEVEL)
        _logger = logger

    if level is not None:
        _logger.setLevel(level.upper())
    return _logger
