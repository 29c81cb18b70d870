"""Read and write ``favorites.json`` beside a workspace marker.

All access is defensive: a missing or malformed file loads as an empty
document, and write failures are logged and otherwise ignored so favorites
never interrupt the host.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .favorites_model import FavoritesDocument, document_from_json, document_to_json

FAVORITES_FILENAME = "favorites.json"

logger = logging.getLogger(__name__)


def favorites_file_for(workspace_marker: Path) -> Path:
    """Return the favorites file stored next to ``workspace_marker``."""
    return workspace_marker.parent / FAVORITES_FILENAME


def load_document(path: Path) -> FavoritesDocument:
    """Load a favorites document, returning an empty one on any failure."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return FavoritesDocument()
    except Exception as exc:
        logger.warning("ignoring unreadable favorites file %s: %s", path, exc)
        return FavoritesDocument()
    if not isinstance(data, dict):
        logger.warning("ignoring favorites file %s: top-level value is not an object", path)
    return document_from_json(data)


def save_document(path: Path, document: FavoritesDocument) -> bool:
    """Persist ``document`` as pretty-printed JSON, overwriting ``path``.

    Returns ``False`` when the write failed.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(document_to_json(document), indent=2, ensure_ascii=False)
        path.write_text(text + "\n", encoding="utf-8")
    except Exception as exc:
        logger.warning("could not save favorites to %s: %s", path, exc)
        return False
    return True


__all__ = [
    "FAVORITES_FILENAME",
    "favorites_file_for",
    "load_document",
    "save_document",
]
