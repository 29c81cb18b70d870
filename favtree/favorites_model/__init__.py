"""Domain model for favorites trees.

This package contains non-UI tree primitives:
- file/folder entry datatypes and the versioned document container
- sibling ordering (sort key, sorted insert, recursive sort)
- identity-based tree searches
- JSON-shape encode/decode helpers
"""

from __future__ import annotations

from .types import DOCUMENT_VERSION, FavoriteEntry, FavoritesDocument
from .ordering import entry_sort_key, insert_sorted, is_sorted, sort_recursively
from .search import find_by_names, find_container, is_descendant_of, iter_file_paths, remove_from_tree
from .codec import document_from_json, document_to_json, entries_from_json, entry_from_json, entry_to_json

__all__ = [
    "DOCUMENT_VERSION",
    "FavoriteEntry",
    "FavoritesDocument",
    "entry_sort_key",
    "insert_sorted",
    "is_sorted",
    "sort_recursively",
    "find_by_names",
    "find_container",
    "is_descendant_of",
    "iter_file_paths",
    "remove_from_tree",
    "document_from_json",
    "document_to_json",
    "entries_from_json",
    "entry_from_json",
    "entry_to_json",
]
