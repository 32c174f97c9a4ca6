"""Logging setup for applications embedding masked fields."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .user_config import get_appdata_dir

LOG_FILE_NAME = "numask.log"
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3

_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
_HANDLER_MARK = "_numask_handler"


def _installed_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if getattr(handler, _HANDLER_MARK, False)]


def setup_logging(log_dir: Optional[Path] = None, console: bool = False) -> Path:
    """Send log records to a rotating file and, with *console*, to stderr.

    The file lives in ``<appdata>/logs`` unless *log_dir* is given.  Calling
    this again replaces the handlers installed by the previous call; handlers
    added by anyone else are left alone.  Returns the log file path.
    """
    directory = Path(log_dir) if log_dir is not None else Path(get_appdata_dir()) / "logs"
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / LOG_FILE_NAME

    root_logger = logging.getLogger()
    for handler in _installed_handlers(root_logger):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.DEBUG)

    file_handler = RotatingFileHandler(
        path,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    handlers: list[logging.Handler] = [file_handler]

    if console and sys.stderr is not None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.INFO)
        handlers.append(console_handler)

    formatter = logging.Formatter(_LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        root_logger.addHandler(handler)

    root_logger.debug("Logging configured: %s", path)
    return path


__all__ = ["setup_logging"]
