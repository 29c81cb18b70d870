"""Public package surface for favtree.

Exports ``FavoritesStore`` and the favorites datatypes, plus ``main`` for
programmatic CLI invocation.
"""

from __future__ import annotations

from .favorites_model import DOCUMENT_VERSION, FavoriteEntry, FavoritesDocument
from .store import FavoritesStore


def main(*args, **kwargs):
    """Lazily import the CLI entrypoint so argparse setup loads only when invoked."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["DOCUMENT_VERSION", "FavoriteEntry", "FavoritesDocument", "FavoritesStore", "main"]
