"""Text rendering of favorites trees for terminal output."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .favorites_model import FavoriteEntry


@dataclass(frozen=True)
class TreeTheme:
    """ANSI palette used when printing favorites."""

    reset: str
    marker: str
    folder: str
    file: str
    path: str
    empty: str


DEFAULT_TREE_THEME = TreeTheme(
    reset="\033[0m",
    marker="\033[38;5;44m",
    folder="\033[1;34m",
    file="\033[38;5;252m",
    path="\033[2;38;5;250m",
    empty="\033[2m",
)

PLAIN_TREE_THEME = TreeTheme(reset="", marker="", folder="", file="", path="", empty="")

EMPTY_FOLDER_LABEL = "(empty)"


def format_entry(
    entry: FavoriteEntry,
    depth: int,
    theme: TreeTheme,
    path_label: str | None = None,
) -> str:
    """Render one entry row; folders carry a marker, files align under it."""
    if entry.is_folder:
        indent = "  " * depth
        return f"{indent}{theme.marker}▾ {theme.reset}{theme.folder}{entry.name}/{theme.reset}"
    indent = "  " * depth + "  "
    row = f"{indent}{theme.file}{entry.name}{theme.reset}"
    if path_label:
        row += f"  {theme.path}{path_label}{theme.reset}"
    return row


def render_favorites(
    entries: Sequence[FavoriteEntry],
    *,
    no_color: bool = False,
    path_label_for: Callable[[FavoriteEntry], str | None] | None = None,
) -> list[str]:
    """Render ``entries`` depth-first in stored order, one row per entry.

    ``path_label_for`` may return a path shown after each file name.
    """
    theme = PLAIN_TREE_THEME if no_color else DEFAULT_TREE_THEME
    rows: list[str] = []

    def walk(items: Sequence[FavoriteEntry], depth: int) -> None:
        for entry in items:
            label = path_label_for(entry) if path_label_for is not None and not entry.is_folder else None
            rows.append(format_entry(entry, depth, theme, label))
            if entry.is_folder:
                if entry.children:
                    walk(entry.children, depth + 1)
                else:
                    rows.append(f"{'  ' * (depth + 2)}{theme.empty}{EMPTY_FOLDER_LABEL}{theme.reset}")

    walk(entries, 0)
    return rows


__all__ = [
    "TreeTheme",
    "DEFAULT_TREE_THEME",
    "PLAIN_TREE_THEME",
    "EMPTY_FOLDER_LABEL",
    "format_entry",
    "render_favorites",
]
