# app/utils/logger.py
"""
Centralised logging configuration for the entire application.
Logs to console and to the rotating file named by settings.LOG_FILE.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from app.config import settings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))

_configured = False


def _log_path() -> str:
    if os.path.isabs(settings.LOG_FILE):
        return settings.LOG_FILE
    return os.path.join(PROJECT_ROOT, settings.LOG_FILE)


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    level = settings.LOG_LEVEL.upper()
    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers = [logging.StreamHandler()]
    if settings.LOG_FILE:
        path = _log_path()
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handlers.append(RotatingFileHandler(
            filename=path,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        ))

    root = logging.getLogger()
    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(fmt)
        root.addHandler(handler)

    # Quiet unless echo is switched on in app/database.py
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module. An empty LOG_FILE logs to console only."""
    _configure_root_logger()
    return logging.getLogger(name)
