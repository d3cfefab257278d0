"""Configuration path resolution.

Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    REGIONKEEPER_CONFIG — parser configuration file (default: ./regionkeeper.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_CONFIG_NAME = "regionkeeper.yaml"


def config_path(explicit: Path | str | None = None) -> Path:
    """Return the configuration file path (which may not exist)."""
    if explicit:
        return Path(explicit).expanduser()
    env = os.environ.get("REGIONKEEPER_CONFIG")
    if env:
        return Path(env).expanduser()
    return Path.cwd() / DEFAULT_CONFIG_NAME
