"""Mini README: Application-wide logging helpers for the transaction ledger.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared handler and sets the level.

Usage:
    Modules import ``get_logger`` and keep a module level ``LOGGER``. The
    console calls ``configure_root_logger`` with the configured level. The
    handler is installed exactly once so repeated imports or test runs do not
    duplicate output; later calls only adjust the level.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def configure_root_logger(level: int = logging.INFO) -> None:
    """Configure the root logger once, then only adjust its level."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
