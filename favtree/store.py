"""Favorites store: the single owner of a workspace's favorites tree.

The store keeps four things in step:
- the favorites document (root items plus nested virtual folders)
- the base directory that stored file paths are relative to
- a case-insensitive index of every favorited relative path
- ``favorites.json`` on disk, rewritten after every mutation

Mutations never raise for missing entries, duplicates, or rejected moves; they
log and return ``None``/no-op instead. Listeners on ``changed`` receive the
narrowest affected folder, or ``None`` meaning "re-derive from the root".

The store is not thread-safe. Construct one per workspace session and pass it
to whatever needs it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path

from .events import ChangeChannel
from .favorites_model import (
    FavoriteEntry,
    FavoritesDocument,
    find_by_names,
    find_container,
    insert_sorted,
    is_descendant_of,
    remove_from_tree,
    sort_recursively,
)
from .path_index import FavoritePathIndex, fold_path
from .paths import to_absolute, to_relative
from .persistence import favorites_file_for, load_document, save_document

WorkspaceProvider = Callable[[], Path | None]

logger = logging.getLogger(__name__)


def _drop_duplicate_files(items: list[FavoriteEntry], seen: set[str]) -> int:
    """Remove file entries whose folded path already appeared earlier in the walk."""
    dropped = 0
    kept: list[FavoriteEntry] = []
    for entry in items:
        if entry.is_folder:
            dropped += _drop_duplicate_files(entry.children, seen)
            kept.append(entry)
            continue
        folded = fold_path(entry.path)
        if folded in seen:
            dropped += 1
            continue
        seen.add(folded)
        kept.append(entry)
    items[:] = kept
    return dropped


class FavoritesStore:
    """Favorites tree, path index, and persistence for one workspace."""

    def __init__(self, workspace_provider: WorkspaceProvider | None = None, *, visible: bool = True) -> None:
        self._workspace_provider = workspace_provider
        self._document = FavoritesDocument()
        self._workspace_marker: Path | None = None
        self._base_directory: Path | None = None
        self._favorites_file: Path | None = None
        self._index = FavoritePathIndex()
        self._visible = bool(visible)
        self.changed: ChangeChannel[FavoriteEntry | None] = ChangeChannel()
        self.visibility_changed: ChangeChannel[None] = ChangeChannel()

    # -- context -----------------------------------------------------------

    @property
    def base_directory(self) -> Path | None:
        return self._base_directory

    @property
    def favorites_file(self) -> Path | None:
        return self._favorites_file

    @property
    def is_loaded(self) -> bool:
        return self._workspace_marker is not None

    def load(self, workspace_marker: str | os.PathLike[str]) -> None:
        """Load favorites stored beside ``workspace_marker``.

        The file is re-sorted and stripped of duplicate paths in case it was
        edited by hand. Listeners are notified even when nothing was loaded.
        """
        marker = Path(workspace_marker)
        self._workspace_marker = marker
        self._base_directory = marker.parent
        self._favorites_file = favorites_file_for(marker)

        document = load_document(self._favorites_file)
        sort_recursively(document.items)
        dropped = _drop_duplicate_files(document.items, set())
        if dropped:
            logger.warning("dropped %d duplicate favorite path(s) from %s", dropped, self._favorites_file)
        self._document = document
        self._index.rebuild(document.items)
        self.changed.emit(None)

    def clear(self) -> None:
        """Forget the active workspace, e.g. when it closes."""
        self._workspace_marker = None
        self._base_directory = None
        self._favorites_file = None
        self._document = FavoritesDocument()
        self._index.clear()
        self.changed.emit(None)

    def ensure_loaded(self) -> None:
        """Resolve the workspace from the provider the first time it is needed."""
        if self._workspace_marker is not None or self._workspace_provider is None:
            return
        try:
            marker = self._workspace_provider()
        except Exception as exc:
            logger.warning("workspace provider failed: %s", exc)
            return
        if marker is not None:
            self.load(marker)

    def save(self) -> bool:
        """Write the whole document to ``favorites.json``; ``False`` when unsaved."""
        self.ensure_loaded()
        if self._favorites_file is None:
            logger.debug("no workspace loaded; favorites kept in memory only")
            return False
        return save_document(self._favorites_file, self._document)

    def to_relative(self, absolute_path: str | os.PathLike[str]) -> str:
        return to_relative(self._base_directory, absolute_path)

    def to_absolute(self, relative_path: str) -> str:
        return to_absolute(self._base_directory, relative_path)

    def absolute_path_for(self, entry: FavoriteEntry) -> str | None:
        """Return the openable path of a file entry, ``None`` for folders."""
        if entry.is_folder or not entry.path:
            return None
        return self.to_absolute(entry.path)

    # -- queries -----------------------------------------------------------

    @property
    def document(self) -> FavoritesDocument:
        return self._document

    @property
    def indexed_paths(self) -> frozenset[str]:
        return self._index.snapshot()

    @property
    def has_favorites(self) -> bool:
        self.ensure_loaded()
        return bool(self._document.items)

    def root_items(self) -> tuple[FavoriteEntry, ...]:
        self.ensure_loaded()
        return tuple(self._document.items)

    def folder_items(self, folder: FavoriteEntry | None) -> tuple[FavoriteEntry, ...]:
        if folder is None or not folder.is_folder:
            return ()
        return tuple(folder.children)

    def is_favorited(self, absolute_path: str | os.PathLike[str]) -> bool:
        self.ensure_loaded()
        return self.to_relative(absolute_path) in self._index

    def contains(self, entry: FavoriteEntry) -> bool:
        found, _parent = find_container(self._document.items, entry)
        return found

    def find_parent(self, entry: FavoriteEntry) -> FavoriteEntry | None:
        """Return the folder holding ``entry``; ``None`` for root-level or detached entries."""
        _found, parent = find_container(self._document.items, entry)
        return parent

    def find_by_names(self, names: Iterable[str]) -> FavoriteEntry | None:
        """Resolve a display-name path such as ``["Docs", "readme.md"]``."""
        self.ensure_loaded()
        return find_by_names(self._document.items, names)

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        value = bool(value)
        if value == self._visible:
            return
        self._visible = value
        self.visibility_changed.emit(None)

    # -- mutations ---------------------------------------------------------

    def _commit(self, affected: FavoriteEntry | None) -> None:
        self.save()
        self.changed.emit(affected)

    def _siblings_of(self, parent: FavoriteEntry | None) -> list[FavoriteEntry]:
        return self._document.items if parent is None else parent.children

    def _is_attached_folder(self, folder: FavoriteEntry | None) -> bool:
        return folder is not None and folder.is_folder and self.contains(folder)

    def _add_file_under(self, absolute_path: str | os.PathLike[str], parent: FavoriteEntry | None) -> FavoriteEntry | None:
        relative_path = self.to_relative(absolute_path)
        if not relative_path:
            return None
        if relative_path in self._index:
            logger.debug("already a favorite: %s", relative_path)
            return None
        entry = FavoriteEntry.file(relative_path)
        insert_sorted(self._siblings_of(parent), entry)
        self._index.add(relative_path)
        self._commit(parent)
        return entry

    def add_file(self, absolute_path: str | os.PathLike[str]) -> FavoriteEntry | None:
        """Add a file at the root. Returns ``None`` when it is already favorited anywhere."""
        self.ensure_loaded()
        return self._add_file_under(absolute_path, None)

    def add_file_to_folder(
        self, absolute_path: str | os.PathLike[str], folder: FavoriteEntry
    ) -> FavoriteEntry | None:
        """Add a file inside ``folder``; the duplicate check spans the whole tree."""
        self.ensure_loaded()
        if not self._is_attached_folder(folder):
            logger.debug("add target is not a folder in this tree: %r", folder)
            return None
        return self._add_file_under(absolute_path, folder)

    def _create_folder_under(self, name: str, parent: FavoriteEntry | None) -> FavoriteEntry | None:
        name = name.strip()
        if not name:
            return None
        folder = FavoriteEntry.folder(name)
        insert_sorted(self._siblings_of(parent), folder)
        self._commit(parent)
        return folder

    def create_folder(self, name: str) -> FavoriteEntry | None:
        self.ensure_loaded()
        return self._create_folder_under(name, None)

    def create_folder_in(self, name: str, parent_folder: FavoriteEntry) -> FavoriteEntry | None:
        self.ensure_loaded()
        if not self._is_attached_folder(parent_folder):
            logger.debug("parent is not a folder in this tree: %r", parent_folder)
            return None
        return self._create_folder_under(name, parent_folder)

    def rename_folder(self, folder: FavoriteEntry, new_name: str) -> None:
        """Rename ``folder`` and move it to its sorted place among its siblings."""
        self.ensure_loaded()
        if folder is None or not folder.is_folder:
            return
        new_name = new_name.strip()
        if not new_name or new_name == folder.name:
            return
        found, parent = find_container(self._document.items, folder)
        if not found:
            logger.debug("rename target not in tree: %r", folder)
            return
        siblings = self._siblings_of(parent)
        remove_from_tree(siblings, folder)
        folder.name = new_name
        insert_sorted(siblings, folder)
        self._commit(parent)

    def move(self, item: FavoriteEntry, target_folder: FavoriteEntry | None = None) -> None:
        """Re-parent ``item`` under ``target_folder`` (``None`` is the root).

        Moving a folder into itself or one of its descendants is ignored.
        """
        self.ensure_loaded()
        if item is None:
            return
        if target_folder is not None:
            if item is target_folder or is_descendant_of(target_folder, item):
                logger.debug("rejected move of %r into itself or a descendant", item.name)
                return
            if not self._is_attached_folder(target_folder):
                logger.debug("move target is not a folder in this tree: %r", target_folder)
                return
        if not remove_from_tree(self._document.items, item):
            logger.debug("move source not in tree: %r", item)
            return
        insert_sorted(self._siblings_of(target_folder), item)
        self._commit(None)

    def remove(self, item: FavoriteEntry) -> None:
        """Detach ``item`` wherever it is; folders take their nested paths with them."""
        self.ensure_loaded()
        if item is None:
            return
        if not remove_from_tree(self._document.items, item):
            logger.debug("remove target not in tree: %r", item)
            return
        self._index.discard_entry(item)
        self._commit(None)


__all__ = ["FavoritesStore", "WorkspaceProvider"]
