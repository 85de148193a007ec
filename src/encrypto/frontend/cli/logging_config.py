"""Lightweight logging setup for the command line."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "ENCRYPTO_LOG_LEVEL"


def configure_logging(level: int | None = None) -> None:
    # Configure root logger once; stderr keeps stdout clean for results.
    if level is None:
        name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
