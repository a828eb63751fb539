"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "todoist_cli"
_LOG_FILE = "todoist.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2
_FORMAT = "%(asctime)s %(levelname)-7s %(module)s:%(lineno)d %(message)s"

_logger: logging.Logger | None = None


def _file_handler() -> logging.Handler:
    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Handlers attached by others (pytest's log capture, for one) do not stop
    the log file from being attached.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    if not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        logger.addHandler(_file_handler())
    logger.propagate = False

    _logger = logger
    return _logger
