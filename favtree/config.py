"""Persistent per-user JSON preferences.

Stores the favorites visibility flag and the marker file names used to
discover a workspace. All access is defensive: malformed or missing config
falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "favtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_WORKSPACE_MARKERS = ("favorites.json", "pyproject.toml", "setup.cfg", "setup.py", ".git")

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.warning("could not save config %s: %s", CONFIG_PATH, exc)


def load_favorites_visible() -> bool:
    """Return persisted favorites visibility.

    Only explicit boolean values are accepted; anything else means visible.
    """
    value = load_config().get("favorites_visible")
    return value if isinstance(value, bool) else True


def save_favorites_visible(visible: bool) -> None:
    config = load_config()
    config["favorites_visible"] = bool(visible)
    save_config(config)


def _sanitize_markers(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    markers: list[str] = []
    for raw in value:
        if not isinstance(raw, str):
            continue
        stripped = raw.strip()
        if stripped and stripped not in markers and "/" not in stripped:
            markers.append(stripped)
    return tuple(markers)


def load_workspace_markers() -> tuple[str, ...]:
    """Return marker names checked while walking up from the working directory."""
    markers = _sanitize_markers(load_config().get("workspace_markers"))
    return markers or DEFAULT_WORKSPACE_MARKERS


def save_workspace_markers(markers: list[str]) -> None:
    """Persist marker names; invalid or duplicate names are dropped first."""
    config = load_config()
    config["workspace_markers"] = list(_sanitize_markers(list(markers)))
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_WORKSPACE_MARKERS",
    "load_config",
    "save_config",
    "load_favorites_visible",
    "save_favorites_visible",
    "load_workspace_markers",
    "save_workspace_markers",
]
