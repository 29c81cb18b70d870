"""Case-insensitive set of favorited relative paths for O(1) duplicate checks."""

from __future__ import annotations

from collections.abc import Iterable

from .favorites_model import FavoriteEntry, iter_file_paths


def fold_path(path: str) -> str:
    """Normalize a stored path for case-insensitive, separator-agnostic comparison."""
    return path.replace("\\", "/").casefold()


class FavoritePathIndex:
    """Folded relative paths of every file entry reachable from the root."""

    def __init__(self) -> None:
        self._paths: set[str] = set()

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and fold_path(path) in self._paths

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._paths)

    def add(self, path: str) -> None:
        if path:
            self._paths.add(fold_path(path))

    def discard(self, path: str) -> None:
        if path:
            self._paths.discard(fold_path(path))

    def clear(self) -> None:
        self._paths.clear()

    def discard_entry(self, entry: FavoriteEntry) -> None:
        for path in iter_file_paths((entry,)):
            self.discard(path)

    def rebuild(self, items: Iterable[FavoriteEntry]) -> None:
        self._paths = {fold_path(path) for path in iter_file_paths(items)}


__all__ = ["FavoritePathIndex", "fold_path"]
