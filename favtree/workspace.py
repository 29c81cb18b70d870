"""Workspace discovery: find the marker file a favorites list is stored beside."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .config import load_workspace_markers
from .store import WorkspaceProvider

logger = logging.getLogger(__name__)


def find_workspace_marker(start: Path, markers: Sequence[str]) -> Path | None:
    """Walk from ``start`` up to the filesystem root looking for a marker.

    At each directory markers are tried in order; the first hit wins. Returns
    the marker path (its parent is the workspace base directory).
    """
    try:
        current = start.resolve()
    except OSError:
        current = start.absolute()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        for marker in markers:
            candidate = directory / marker
            if candidate.exists():
                return candidate
    return None


def workspace_provider_for(start: Path | None = None, markers: Sequence[str] | None = None) -> WorkspaceProvider:
    """Build a provider that discovers the workspace lazily, on first use."""

    def provide() -> Path | None:
        origin = start if start is not None else Path.cwd()
        active_markers = tuple(markers) if markers is not None else load_workspace_markers()
        marker = find_workspace_marker(origin, active_markers)
        if marker is None:
            logger.debug("no workspace marker %s above %s", active_markers, origin)
        return marker

    return provide


__all__ = ["find_workspace_marker", "workspace_provider_for"]
