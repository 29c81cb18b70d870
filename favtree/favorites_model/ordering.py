"""Sibling ordering for favorites: folders first, then files, names case-insensitive."""

from __future__ import annotations

from .types import FavoriteEntry


def entry_sort_key(entry: FavoriteEntry) -> tuple[int, str]:
    """Return the ``(kind, folded name)`` key shared by every ordering path."""
    return (0 if entry.is_folder else 1, entry.name.casefold())


def insert_sorted(items: list[FavoriteEntry], entry: FavoriteEntry) -> int:
    """Insert ``entry`` before the first sibling that sorts after it.

    Siblings with an equal key keep their place ahead of the new entry.
    Returns the insertion index.
    """
    new_key = entry_sort_key(entry)
    for index, sibling in enumerate(items):
        if entry_sort_key(sibling) > new_key:
            items.insert(index, entry)
            return index
    items.append(entry)
    return len(items) - 1


def sort_recursively(items: list[FavoriteEntry]) -> None:
    """Stable-sort ``items`` and every nested folder's children in place."""
    items.sort(key=entry_sort_key)
    for entry in items:
        if entry.is_folder:
            sort_recursively(entry.children)


def is_sorted(items: list[FavoriteEntry]) -> bool:
    """Return whether ``items`` and all nested children already satisfy the ordering."""
    keys = [entry_sort_key(entry) for entry in items]
    if any(left > right for left, right in zip(keys, keys[1:])):
        return False
    return all(is_sorted(entry.children) for entry in items if entry.is_folder)


__all__ = [
    "entry_sort_key",
    "insert_sorted",
    "sort_recursively",
    "is_sorted",
]
