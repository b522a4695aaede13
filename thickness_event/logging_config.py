"""thickness_event/logging_config.py
Author: Sabin Thapa <sthapa3@kent.edu>

Logging setup for the 'thickness_event' namespace.

Modules log through logging.getLogger(__name__); nothing is printed until an
application (or notebook) calls setup_logging().
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "thickness_event"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the package logger: stdout handler plus optional log file."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # avoid duplicate output when called again from a notebook
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    logger.debug("Logging initialized.")
    return logger
