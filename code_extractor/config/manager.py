"""Application settings.

Read from config/settings.json under the project root:
  - grid_rows / grid_columns: size of the preview grid
  - export_filename / sheet_name: spreadsheet naming
  - output_dir: where downloads are saved (empty = ~/Downloads)

Settings are never written back.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional


DEFAULTS: Dict[str, Any] = {
    "grid_rows": 10,
    "grid_columns": 5,
    "export_filename": "extracted_codes.xlsx",
    "sheet_name": "Codes",
    "output_dir": "",
}


def _get_project_root() -> str:
    """Get project root (parent of code_extractor/)."""
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return str(Path(__file__).resolve().parents[2])


def _get_config_dir() -> str:
    """Get config directory path (project_root/config)."""
    return os.path.join(_get_project_root(), "config")


def _get_settings_path() -> str:
    """Path to config/settings.json."""
    return os.path.join(_get_config_dir(), "settings.json")


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


_VALIDATORS = {
    "grid_rows": _is_positive_int,
    "grid_columns": _is_positive_int,
    "export_filename": lambda v: isinstance(v, str) and v.lower().endswith(".xlsx")
    and os.path.basename(v) == v,
    "sheet_name": lambda v: isinstance(v, str) and 0 < len(v) <= 31,
    "output_dir": lambda v: isinstance(v, str),
}


def _load_settings(path: str) -> Dict[str, Any]:
    """Load settings from *path*, falling back to defaults key by key."""
    settings = dict(DEFAULTS)
    if not os.path.exists(path):
        return settings
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Error loading settings: {e}")
        return settings
    if not isinstance(data, dict):
        print(f"Error loading settings: expected a JSON object in {path}")
        return settings

    for key, value in data.items():
        if key not in DEFAULTS:
            continue
        if _VALIDATORS[key](value):
            settings[key] = value
        else:
            print(f"Invalid setting {key}={value!r}; using {DEFAULTS[key]!r}")
    return settings


class ConfigManager:
    """Read-only access to the application settings."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_file = config_path or _get_settings_path()
        self.settings = _load_settings(self.config_file)

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    @property
    def grid_rows(self) -> int:
        return self.settings["grid_rows"]

    @property
    def grid_columns(self) -> int:
        return self.settings["grid_columns"]

    def get_output_dir(self) -> str:
        """Download directory; ~/Downloads unless configured."""
        output_dir = self.settings.get("output_dir") or ""
        if output_dir:
            return os.path.expanduser(output_dir)
        return str(Path.home() / "Downloads")
