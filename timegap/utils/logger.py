# timegap/utils/logger.py
"""
Logging setup shared by every module of the pipeline.
Console output plus a size-rotated file under LOG_DIR (default: <repo>/logs).
Configured lazily on the first get_logger() call.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from timegap.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "logs")

# Marks handlers installed here so a second configure call replaces them.
_HANDLER_TAG = "_timegap_handler"


def log_file_path() -> str:
    return os.path.join(settings.LOG_DIR or DEFAULT_LOG_DIR, settings.LOG_FILE)


def configure_logging(level: Optional[str] = None) -> None:
    """(Re)install the console and rotating-file handlers on the root logger."""
    level = (level or settings.LOG_LEVEL).upper()
    path = log_file_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    console = logging.StreamHandler()
    file_handler = RotatingFileHandler(
        filename=path,
        maxBytes=settings.LOG_MAX_MB * 1024 * 1024,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )

    root = logging.getLogger()
    for handler in [h for h in root.handlers if getattr(h, _HANDLER_TAG, False)]:
        root.removeHandler(handler)
        handler.close()
    for handler in (console, file_handler):
        handler.setLevel(level)
        handler.setFormatter(fmt)
        setattr(handler, _HANDLER_TAG, True)
        root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Named logger; the first call wires up the handlers."""
    root = logging.getLogger()
    if not any(getattr(h, _HANDLER_TAG, False) for h in root.handlers):
        configure_logging()
    return logging.getLogger(name)
