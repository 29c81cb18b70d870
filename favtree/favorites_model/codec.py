"""JSON-shape conversion for favorites documents.

Decoding is defensive: malformed entries are dropped rather than failing the
whole document, mirroring how persisted config is sanitized on load.
Encoding omits ``path`` for folders and ``children`` for files.
"""

from __future__ import annotations

from .types import DOCUMENT_VERSION, FavoriteEntry, FavoritesDocument


def entry_to_json(entry: FavoriteEntry) -> dict[str, object]:
    """Serialize one entry, recursing into folder children."""
    data: dict[str, object] = {"name": entry.name}
    if entry.is_folder:
        data["children"] = [entry_to_json(child) for child in entry.children]
    else:
        data["path"] = entry.path
    return data


def document_to_json(document: FavoritesDocument) -> dict[str, object]:
    """Serialize a document to its persisted JSON object."""
    return {
        "version": document.version,
        "items": [entry_to_json(entry) for entry in document.items],
    }


def entry_from_json(raw: object) -> FavoriteEntry | None:
    """Decode one entry, returning ``None`` for unusable shapes.

    A ``children`` list marks a folder even when empty; otherwise a non-empty
    string ``path`` marks a file. Entries without a usable name are dropped.
    """
    if not isinstance(raw, dict):
        return None
    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        return None

    raw_children = raw.get("children")
    if isinstance(raw_children, list):
        return FavoriteEntry(name=name, children=entries_from_json(raw_children))

    path = raw.get("path")
    if isinstance(path, str) and path:
        return FavoriteEntry(name=name, path=path)
    return None


def entries_from_json(raw_items: object) -> list[FavoriteEntry]:
    """Decode a sibling list, skipping malformed members."""
    if not isinstance(raw_items, list):
        return []
    entries: list[FavoriteEntry] = []
    for raw in raw_items:
        entry = entry_from_json(raw)
        if entry is not None:
            entries.append(entry)
    return entries


def document_from_json(data: object) -> FavoritesDocument:
    """Decode a persisted document; anything but a JSON object yields an empty one."""
    if not isinstance(data, dict):
        return FavoritesDocument()
    version = data.get("version")
    if isinstance(version, bool) or not isinstance(version, int):
        version = DOCUMENT_VERSION
    return FavoritesDocument(version=version, items=entries_from_json(data.get("items")))


__all__ = [
    "entry_to_json",
    "document_to_json",
    "entry_from_json",
    "entries_from_json",
    "document_from_json",
]
