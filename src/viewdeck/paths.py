"""XDG-compliant path helpers for viewdeck."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir


def get_config_dir() -> Path:
    """Get the config directory (config.toml)."""
    override = os.environ.get("VIEWDECK_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("viewdeck"))


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"

