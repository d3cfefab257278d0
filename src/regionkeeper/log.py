"""Logging helpers — one namespaced logger tree under 'regionkeeper'."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

BASE_LOGGER = "regionkeeper"


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Configure the base 'regionkeeper' logger once and return it.

    Calling again only adjusts the level.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    if base.handlers:
        return base

    base.propagate = False
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under 'regionkeeper' (``sync`` → ``regionkeeper.sync``)."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")
