"""Command-line front door for favtree.

Resolves the workspace, builds a ``FavoritesStore`` for it, and dispatches
one subcommand (list/add/mkdir/rename/mv/rm/status/show/hide) to the store.
Entries are addressed by ``/``-separated display names, e.g. ``Docs/readme.md``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .config import load_favorites_visible, save_favorites_visible
from .favorites_model import FavoriteEntry, is_descendant_of
from .render import render_favorites
from .store import FavoritesStore
from .workspace import workspace_provider_for


def _split_entry_path(value: str) -> list[str]:
    return [part.strip() for part in value.replace("\\", "/").split("/") if part.strip()]


def _resolve_entry(store: FavoritesStore, value: str) -> FavoriteEntry:
    entry = store.find_by_names(_split_entry_path(value))
    if entry is None:
        raise SystemExit(f"No favorite named: {value}")
    return entry


def _resolve_folder(store: FavoritesStore, value: str) -> FavoriteEntry:
    entry = _resolve_entry(store, value)
    if not entry.is_folder:
        raise SystemExit(f"Not a favorites folder: {value}")
    return entry


def _folder_name(value: str) -> str:
    """argparse type for virtual folder names."""
    stripped = value.strip()
    if not stripped:
        raise argparse.ArgumentTypeError("folder name must not be empty")
    if "/" in stripped or "\\" in stripped:
        raise argparse.ArgumentTypeError("folder name must not contain path separators")
    return stripped


def open_store(workspace: str | None) -> FavoritesStore:
    """Create the process store for ``workspace`` (a marker file) or the discovered workspace."""
    store = FavoritesStore(workspace_provider_for(), visible=load_favorites_visible())
    if workspace is not None:
        marker = Path(workspace)
        if not marker.exists():
            raise SystemExit(f"Workspace marker not found: {marker}")
        store.load(marker.absolute())
        return store
    store.ensure_loaded()
    if not store.is_loaded:
        raise SystemExit("No workspace found; pass --workspace MARKER.")
    return store


def _cmd_list(store: FavoritesStore, args: argparse.Namespace) -> None:
    if not store.visible:
        print("(favorites hidden; run `favtree show`)")
        return
    items = store.root_items()
    if not items:
        print("(no favorites)")
        return
    no_color = args.no_color or not sys.stdout.isatty()
    path_label_for = store.absolute_path_for if args.absolute else None
    for row in render_favorites(items, no_color=no_color, path_label_for=path_label_for):
        print(row)


def _cmd_add(store: FavoritesStore, args: argparse.Namespace) -> None:
    folder = _resolve_folder(store, args.folder) if args.folder else None
    for raw in args.files:
        absolute = os.path.abspath(raw)
        if os.path.isdir(absolute):
            print(f"skipped directory: {raw}")
            continue
        if folder is None:
            entry = store.add_file(absolute)
        else:
            entry = store.add_file_to_folder(absolute, folder)
        if entry is None:
            print(f"already a favorite: {raw}")
        else:
            print(f"added: {entry.path}")


def _cmd_mkdir(store: FavoritesStore, args: argparse.Namespace) -> None:
    if args.parent:
        store.create_folder_in(args.name, _resolve_folder(store, args.parent))
    else:
        store.create_folder(args.name)


def _cmd_rename(store: FavoritesStore, args: argparse.Namespace) -> None:
    store.rename_folder(_resolve_folder(store, args.path), args.new_name)


def _cmd_mv(store: FavoritesStore, args: argparse.Namespace) -> None:
    item = _resolve_entry(store, args.path)
    target = _resolve_folder(store, args.to) if args.to else None
    if target is not None and item.is_folder and (target is item or is_descendant_of(target, item)):
        raise SystemExit("Cannot move a folder into itself or one of its subfolders.")
    store.move(item, target)


def _cmd_rm(store: FavoritesStore, args: argparse.Namespace) -> None:
    store.remove(_resolve_entry(store, args.path))


def _cmd_status(store: FavoritesStore, args: argparse.Namespace) -> None:
    favorited = store.is_favorited(os.path.abspath(args.file))
    print(f"{args.file}: {'favorited' if favorited else 'not favorited'}")


def _cmd_visibility(store: FavoritesStore, args: argparse.Namespace) -> None:
    store.visible = args.command == "show"
    save_favorites_visible(store.visible)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="favtree",
        description="Keep a shareable tree of favorite files for a project workspace.",
    )
    parser.add_argument("--workspace", metavar="MARKER", help="Workspace marker file; favorites.json lives beside it.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--verbose", action="store_true", help="Log diagnostics to stderr.")
    parser.set_defaults(handler=_cmd_list, absolute=False)
    commands = parser.add_subparsers(dest="command")

    list_parser = commands.add_parser("list", help="Print the favorites tree.")
    list_parser.add_argument("--absolute", action="store_true", help="Show absolute file paths.")
    list_parser.set_defaults(handler=_cmd_list)

    add_parser = commands.add_parser("add", help="Add files to favorites.")
    add_parser.add_argument("files", nargs="+", metavar="FILE")
    add_parser.add_argument("--folder", metavar="PATH", help="Favorites folder to add into.")
    add_parser.set_defaults(handler=_cmd_add)

    mkdir_parser = commands.add_parser("mkdir", help="Create a favorites folder.")
    mkdir_parser.add_argument("name", type=_folder_name)
    mkdir_parser.add_argument("--parent", metavar="PATH", help="Folder to create the new folder in.")
    mkdir_parser.set_defaults(handler=_cmd_mkdir)

    rename_parser = commands.add_parser("rename", help="Rename a favorites folder.")
    rename_parser.add_argument("path", metavar="PATH")
    rename_parser.add_argument("new_name", type=_folder_name, metavar="NEW_NAME")
    rename_parser.set_defaults(handler=_cmd_rename)

    mv_parser = commands.add_parser("mv", help="Move a favorite into a folder or back to the root.")
    mv_parser.add_argument("path", metavar="PATH")
    mv_parser.add_argument("--to", metavar="PATH", help="Destination folder (default: root).")
    mv_parser.set_defaults(handler=_cmd_mv)

    rm_parser = commands.add_parser("rm", help="Remove a favorite or folder.")
    rm_parser.add_argument("path", metavar="PATH")
    rm_parser.set_defaults(handler=_cmd_rm)

    status_parser = commands.add_parser("status", help="Report whether a file is a favorite.")
    status_parser.add_argument("file", metavar="FILE")
    status_parser.set_defaults(handler=_cmd_status)

    for name, help_text in (("show", "Show favorites."), ("hide", "Hide favorites.")):
        commands.add_parser(name, help=help_text).set_defaults(handler=_cmd_visibility)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run one favtree subcommand against the workspace store."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    store = open_store(args.workspace)
    args.handler(store, args)
