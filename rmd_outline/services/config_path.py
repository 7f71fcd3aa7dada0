"""Configuration path utilities."""

import os
from pathlib import Path

APP_DIR_NAME = "rmd-outline"


def get_config_dir() -> Path:
    """Get the configuration directory.

    Honors $XDG_CONFIG_HOME when set, otherwise ~/.config/rmd-outline.
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME
