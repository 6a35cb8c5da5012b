"""
Logging Configuration
Sets up the 'checkview' logger for the demo app and for hosts embedding the view.

The level and an optional log file can be overridden from the environment:
    CHECKVIEW_LOG_LEVEL: level name, e.g. DEBUG to follow geometry rebuilds
        and state changes.
    CHECKVIEW_LOG_FILE: path of a file that receives the same records.
"""
import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "CHECKVIEW_LOG_LEVEL"
LOG_FILE_ENV = "CHECKVIEW_LOG_FILE"


def _level_from_env(default: int) -> tuple[int, Optional[str]]:
    """Level named by the environment, plus the rejected name if it is not a level."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default, None
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return default, name
    return level, None


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'checkview' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG). None reads CHECKVIEW_LOG_LEVEL
            and falls back to logging.INFO.
        log_file: Optional path to save logs to. None reads CHECKVIEW_LOG_FILE.
    """
    rejected = None
    if level is None:
        level, rejected = _level_from_env(logging.INFO)
    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV) or None

    logger = logging.getLogger("checkview")
    logger.setLevel(level)

    # a second call (app restarted in the same process) replaces the handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if rejected is not None:
        logger.warning("Unknown log level %r in %s, using %s.", rejected, LOG_LEVEL_ENV, logging.getLevelName(level))
    logger.info("Logging initialized at %s.", logging.getLevelName(level))
