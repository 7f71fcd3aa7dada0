"""Persistent preferences for the outline, editor and window."""

import copy
import json
from pathlib import Path
from typing import Any

import gi

gi.require_version("GObject", "2.0")

from gi.repository import GObject

from .config_path import get_config_dir


DEFAULT_SETTINGS = {
    "outline": {
        "show_line_numbers": True,
        "auto_scan": False,
        "refresh_delay_ms": 500,
        "extensions": [".rmd", ".md"],
    },
    "appearance": {
        "theme": "system",  # system, light, dark
        "syntax_scheme": "Adwaita-dark",
    },
    "editor": {
        "font_family": "Monospace",
        "font_size": 12,
        "word_wrap": True,
    },
    "window": {
        "width": 1100,
        "height": 750,
        "outline_width": 320,
    },
}


class SettingsService(GObject.Object):
    """Outline preferences stored as settings.json in the config directory.

    Keys are dotted paths into DEFAULT_SETTINGS. Every change is written
    straight back to disk and announced through "changed", which the
    window, editor and outline panel listen to:

        settings = SettingsService.get_instance()
        if settings.get("outline.show_line_numbers"):
            ...
        settings.set("outline.refresh_delay_ms", 750)
    """

    __gsignals__ = {
        # (key, new value); key is "*" after a full reset
        "changed": (GObject.SignalFlags.RUN_FIRST, None, (str, object)),
    }

    _instance: "SettingsService | None" = None

    def __init__(self, config_dir: Path | None = None):
        super().__init__()
        self.config_dir = config_dir or get_config_dir()
        self.config_file = self.config_dir / "settings.json"
        self._settings: dict = {}
        self._ensure_config_dir()
        self._load()

    @classmethod
    def get_instance(cls) -> "SettingsService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _ensure_config_dir(self):
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print(f"Failed to create config directory {self.config_dir}: {e}")

    def _load(self):
        """Read settings.json on top of the defaults; a bad file means defaults."""
        saved = {}
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    saved = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                print(f"Ignoring unreadable settings file {self.config_file}: {e}")
        if not isinstance(saved, dict):
            saved = {}

        self._settings = self._merge_saved(DEFAULT_SETTINGS, saved)

    def _save(self):
        try:
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, indent=2)
        except OSError as e:
            print(f"Failed to save settings: {e}")

    def _merge_saved(self, defaults: dict, saved: dict) -> dict:
        """Saved values win; sections missing from an older file keep their defaults."""
        result = copy.deepcopy(defaults)
        for key, value in saved.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_saved(result[key], value)
            else:
                result[key] = value
        return result

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as "outline.extensions"."""
        value = self._settings
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Store a value, save and emit "changed" (only if it differs)."""
        *sections, name = key.split(".")
        target = self._settings
        for section in sections:
            target = target.setdefault(section, {})

        if target.get(name) != value:
            target[name] = value
            self._save()
            self.emit("changed", key, value)

    def reset(self, key: str | None = None) -> None:
        """Restore one key, or everything when key is None, to its default."""
        if key is None:
            self._settings = copy.deepcopy(DEFAULT_SETTINGS)
            self._save()
            self.emit("changed", "*", None)
            return

        default_value = DEFAULT_SETTINGS
        for part in key.split("."):
            if not isinstance(default_value, dict) or part not in default_value:
                return
            default_value = default_value[part]

        self.set(key, copy.deepcopy(default_value))
