"""Logging for a11yfix: named loggers plus a rotating log file under the home directory."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the "a11yfix" logger has handlers
_CONFIGURED = False


def configure_logging(
    home: Path | None = None,
    level: int | str = logging.INFO,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
    stderr: bool = False,
) -> None:
    """Configure unified a11yfix logging.

    Only entry points call this; library code just asks for loggers.

    Args:
        home: Home directory holding a11yfix.log. If None, derived from environment.
        level: Logging level for the "a11yfix" logger
        max_bytes: Size at which the log file rotates
        backup_count: Rotated files to keep
        stderr: Also mirror records to stderr
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "a11yfix.log"

    root_logger = logging.getLogger("a11yfix")
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if stderr:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"a11yfix.{name}")
