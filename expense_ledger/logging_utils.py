"""Mini README: Application-wide logging helpers for the expense ledger.

Structure:
    * configure_root_logger - one-time root logger setup, later calls only
      adjust the level.
    * get_logger - factory returning module loggers with baseline config.

Usage:
    Modules create ``LOGGER = get_logger(__name__)``. Log output goes to
    stderr so it never mixes with the tables and totals printed on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_LOGGER_INITIALISED = False


def configure_root_logger(level: int = logging.INFO) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger(logging.WARNING)
    return logging.getLogger(name)
