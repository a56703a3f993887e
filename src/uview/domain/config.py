from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences and the recent files
list as JSON in the user data directory. Loading never raises: missing
or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from uview.domain.constants import (
    APPEARANCE_MODES,
    CURRENT_CONFIG_VERSION,
    DEFAULT_MAX_RECENT_FILES,
)
from uview.infra.fs import get_user_data_dir
from uview.infra.logging.config import LEVEL_MAP

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------
def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "app_settings": {
            "appearance_mode": "System",
            "log_level": "INFO",
            "max_recent_files": DEFAULT_MAX_RECENT_FILES,
        },
        "recent_files": [],
        "last_directory": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load application state from disk, merged over the defaults.

    Args:
        path: Config file location, defaults to the user data directory.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    path = path or get_config_path()
    state = get_default_app_state()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    if isinstance(data.get("app_settings"), dict):
        state["app_settings"].update(data["app_settings"])
    if isinstance(data.get("recent_files"), list):
        state["recent_files"] = [p for p in data["recent_files"] if isinstance(p, str)]
    if isinstance(data.get("last_directory"), str):
        state["last_directory"] = data["last_directory"]

    _sanitize_settings(state["app_settings"])

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def _sanitize_settings(settings: Dict[str, Any]) -> None:
    """Replace hand-edited values of the wrong type with their defaults."""
    defaults = get_default_app_state()["app_settings"]

    if settings.get("appearance_mode") not in APPEARANCE_MODES:
        settings["appearance_mode"] = defaults["appearance_mode"]

    level = settings.get("log_level")
    if not isinstance(level, str) or level.strip().upper() not in LEVEL_MAP:
        logger.warning(f"Invalid log_level {level!r}. Using default.")
        settings["log_level"] = defaults["log_level"]

    limit = settings.get("max_recent_files")
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        logger.warning(f"Invalid max_recent_files {limit!r}. Using default.")
        settings["max_recent_files"] = defaults["max_recent_files"]


def save_app_state(state: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
        path: Config file location, defaults to the user data directory.

    Returns:
        bool: True when the file was written.
    """
    path = path or get_config_path()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False


# -----------------------------------------------------------------------------
# Recent Files
# -----------------------------------------------------------------------------
def add_recent_file(state: Dict[str, Any], file_path: str) -> List[str]:
    """
    Move a package path to the front of the recent files list.

    Also records its directory as the last browsed location.

    Args:
        state: Application state to update in place.
        file_path: Package that was just opened or saved.

    Returns:
        List[str]: The updated recent files list.
    """
    file_path = os.path.abspath(file_path)
    limit = state.get("app_settings", {}).get("max_recent_files", DEFAULT_MAX_RECENT_FILES)
    if isinstance(limit, bool) or not isinstance(limit, int):
        limit = DEFAULT_MAX_RECENT_FILES

    recent = [p for p in state.get("recent_files", []) if p != file_path]
    recent.insert(0, file_path)
    state["recent_files"] = recent[:max(limit, 1)]
    state["last_directory"] = os.path.dirname(file_path)
    return state["recent_files"]
