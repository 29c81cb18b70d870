"""Depth-first lookups over favorites trees.

Every helper matches entries by identity, never by name or path equality.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .types import FavoriteEntry


def remove_from_tree(items: list[FavoriteEntry], target: FavoriteEntry) -> bool:
    """Detach ``target`` from ``items`` or any nested folder.

    Returns ``False`` when ``target`` is not reachable.
    """
    for index, entry in enumerate(items):
        if entry is target:
            del items[index]
            return True
    for entry in items:
        if entry.is_folder and remove_from_tree(entry.children, target):
            return True
    return False


def is_descendant_of(candidate: FavoriteEntry, ancestor: FavoriteEntry) -> bool:
    """Return whether ``candidate`` is nested anywhere below ``ancestor``."""
    if not ancestor.is_folder:
        return False
    for child in ancestor.children:
        if child is candidate:
            return True
        if child.is_folder and is_descendant_of(candidate, child):
            return True
    return False


def find_container(
    items: list[FavoriteEntry],
    target: FavoriteEntry,
    parent: FavoriteEntry | None = None,
) -> tuple[bool, FavoriteEntry | None]:
    """Locate the folder holding ``target``.

    Returns ``(found, parent)`` where ``parent`` is ``None`` for root-level
    entries. ``found`` distinguishes root placement from absence.
    """
    for entry in items:
        if entry is target:
            return True, parent
    for entry in items:
        if entry.is_folder:
            found, owner = find_container(entry.children, target, entry)
            if found:
                return True, owner
    return False, None


def find_by_names(items: Sequence[FavoriteEntry], names: Iterable[str]) -> FavoriteEntry | None:
    """Walk display names from the root, matching each segment case-insensitively.

    Folders win over files with the same folded name at a given level.
    """
    current: FavoriteEntry | None = None
    siblings: Sequence[FavoriteEntry] = items
    matched_any = False
    for name in names:
        folded = name.casefold()
        current = next((entry for entry in siblings if entry.name.casefold() == folded), None)
        if current is None:
            return None
        matched_any = True
        siblings = current.children if current.is_folder else ()
    return current if matched_any else None


def iter_file_paths(items: Iterable[FavoriteEntry]):
    """Yield relative paths of every file entry reachable from ``items``."""
    for entry in items:
        for file_entry in entry.iter_files():
            if file_entry.path:
                yield file_entry.path


__all__ = [
    "remove_from_tree",
    "is_descendant_of",
    "find_container",
    "find_by_names",
    "iter_file_paths",
]
