"""Translate favorited file paths between absolute and base-relative forms.

Relative paths are stored POSIX-style so ``favorites.json`` stays portable
when shared through source control. Any path that cannot be expressed under
the base directory is kept as given.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath

logger = logging.getLogger(__name__)


def to_relative(base_directory: Path | None, absolute_path: str | os.PathLike[str]) -> str:
    """Return ``absolute_path`` relative to ``base_directory`` when it lies inside it."""
    raw = os.fspath(absolute_path)
    if base_directory is None or not raw:
        return raw
    try:
        if not os.path.isabs(raw):
            return raw
        candidate = PurePath(os.path.normpath(raw))
        relative = candidate.relative_to(os.path.normpath(base_directory))
    except (ValueError, TypeError) as exc:
        logger.debug("keeping absolute favorite path %s: %s", raw, exc)
        return raw
    if not relative.parts:
        return raw
    return relative.as_posix()


def to_absolute(base_directory: Path | None, relative_path: str) -> str:
    """Resolve a stored path against ``base_directory``; rooted paths pass through."""
    if base_directory is None or not relative_path:
        return relative_path
    if os.path.isabs(relative_path):
        return relative_path
    try:
        return os.path.normpath(os.path.join(base_directory, relative_path))
    except (ValueError, TypeError):
        return relative_path


__all__ = ["to_relative", "to_absolute"]
