"""Mini README: Application-wide logging helpers for toursync.

Structure:
    * configure_root_logger - one-time setup of the root handler and level.
    * get_logger - factory returning module loggers with baseline setup.

Usage:
    Modules keep a module-level ``LOGGER = get_logger(__name__)``. The CLI
    calls ``configure_root_logger`` with the configured level before a run;
    the handler is attached once, so repeated calls only change the level.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str, None] = None) -> None:
    """Attach a single stream handler to the root logger and apply ``level``."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if not _LOGGER_INITIALISED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO)
        _LOGGER_INITIALISED = True

    if level is None:
        return
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root_logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
