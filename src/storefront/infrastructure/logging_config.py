"""Logging setup shared by every entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger to write to stdout at *level*.

    Does nothing if the root logger already has handlers.
    """
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
