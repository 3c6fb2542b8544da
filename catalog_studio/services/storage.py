from __future__ import annotations
import os
from pathlib import Path
from typing import Optional
from catalog_studio.utils.logging import logger
from catalog_studio.utils.io import read_json, write_json
from catalog_studio.utils.typing import Preferences

def _config_dir() -> Path:
    env = os.environ.get("CATALOG_STUDIO_CONFIG_DIR")
    return Path(env).expanduser() if env else Path.home() / ".config" / "catalog-studio"

def preferences_path() -> Path:
    return _config_dir() / "preferences.json"

def get_preferences(path: Optional[Path] = None) -> Preferences:
    path = path or preferences_path()
    try:
        data = read_json(path, default={})
    except ValueError as e:
        logger.warning("storage: unreadable preferences at %s, ignoring: %s", path, e)
        return Preferences()
    if not isinstance(data, dict):
        return Preferences()
    return Preferences(
        licensee_name=str(data.get("licenseeName") or ""),
        assignee_name=str(data.get("assigneeName") or ""),
    )

def set_preferences(licensee_name: str, assignee_name: str, path: Optional[Path] = None) -> None:
    path = path or preferences_path()
    write_json(path, {"licenseeName": licensee_name, "assigneeName": assignee_name})
    logger.info("storage: preferences saved to %s", path)

def clear_preferences(path: Optional[Path] = None) -> None:
    path = path or preferences_path()
    if path.exists():
        path.unlink()
    logger.info("storage: preferences cleared")

class PreferenceStore:
    """Preference persistence bound to one config directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.path = Path(config_dir) / "preferences.json" if config_dir else None

    def get(self) -> Preferences:
        return get_preferences(self.path)

    def set(self, licensee_name: str, assignee_name: str) -> None:
        set_preferences(licensee_name, assignee_name, self.path)

    def clear(self) -> None:
        clear_preferences(self.path)
