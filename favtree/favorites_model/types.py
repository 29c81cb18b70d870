"""Domain datatypes for the favorites tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath

DOCUMENT_VERSION = 2


@dataclass(eq=False)
class FavoriteEntry:
    """One favorites node: a file (``path`` set) or a virtual folder (``children`` set).

    Entries compare by identity so the same name/path may appear on distinct
    objects without tree operations confusing them.
    """

    name: str
    path: str | None = None
    children: list["FavoriteEntry"] | None = None

    @property
    def is_folder(self) -> bool:
        return self.children is not None

    @classmethod
    def file(cls, path: str, name: str | None = None) -> FavoriteEntry:
        """Create a file entry named after the last path component unless ``name`` is given."""
        display = name if name else PurePath(path.replace("\\", "/")).name or path
        return cls(name=display, path=path)

    @classmethod
    def folder(cls, name: str) -> FavoriteEntry:
        """Create an empty virtual folder."""
        return cls(name=name, children=[])

    def iter_files(self):
        """Yield this entry (if a file) or every file nested below it."""
        if not self.is_folder:
            yield self
            return
        for child in self.children:
            yield from child.iter_files()


@dataclass(eq=False)
class FavoritesDocument:
    """Versioned root container persisted as ``favorites.json``."""

    version: int = DOCUMENT_VERSION
    items: list[FavoriteEntry] = field(default_factory=list)


__all__ = [
    "DOCUMENT_VERSION",
    "FavoriteEntry",
    "FavoritesDocument",
]
