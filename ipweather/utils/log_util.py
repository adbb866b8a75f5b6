"""
log_util.py: Shared logger factory.

All module loggers hang off the `ipweather` logger, which owns a single
stderr handler so command output on stdout stays clean.
"""

import logging
import os
import sys
from typing import Optional, Union

ROOT_LOGGER = "ipweather"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


def _root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not any(getattr(h, "_ipweather", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        handler._ipweather = True
        root.addHandler(handler)
        level = os.environ.get("LOG_LEVEL", "WARNING").upper()
        known = isinstance(logging.getLevelName(level), int)
        root.setLevel(level if known else logging.WARNING)
        root.propagate = False
    return root


def app_logger(name: str, log_file: Optional[str] = None) -> logging.Logger:
    """
    Return a logger for `name` under the ipweather hierarchy.

    :param name: Usually `__name__` of the calling module.
    :param log_file: Optional file that also receives this logger's records.
    :return: Configured logging.Logger.
    """
    root = _root_logger()
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    logger = logging.getLogger(name) if name != ROOT_LOGGER else root

    if log_file and not any(
        isinstance(h, logging.FileHandler)
        and h.baseFilename == os.path.abspath(log_file)
        for h in logger.handlers
    ):
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)

    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Change the level of every ipweather logger at once."""
    if isinstance(level, str):
        level = level.upper()
    _root_logger().setLevel(level)
