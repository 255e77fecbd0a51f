"""Depth-bounded discovery of project settings files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ghqperms.constants.discovery import MARKER_DIR_NAME, MAX_SEARCH_DEPTH, SETTINGS_FILENAME

logger = logging.getLogger(__name__)


def find_settings(root: Path, *, max_depth: int = MAX_SEARCH_DEPTH) -> list[Path]:
    """Find ``.claude/settings.local.json`` files at most ``max_depth`` levels below ``root``.

    The walk is best effort: unreadable directories, vanished entries and
    broken links are skipped without aborting the rest of the walk. Symlinks
    are never followed. Results come back in traversal order.
    """
    found: list[Path] = []
    if _is_marker_dir(root):
        _collect(root, found)
    _walk(root, 1, max_depth, found)
    return found


def _walk(directory: Path, depth: int, max_depth: int, found: list[Path]) -> None:
    if depth > max_depth:
        return
    try:
        with os.scandir(directory) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", directory, exc)
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            logger.debug("Skipping entry %s: %s", entry.path, exc)
            continue
        if not is_dir:
            continue
        path = Path(entry.path)
        if entry.name == MARKER_DIR_NAME:
            _collect(path, found)
        _walk(path, depth + 1, max_depth, found)


def _is_marker_dir(path: Path) -> bool:
    try:
        return path.name == MARKER_DIR_NAME and path.is_dir() and not path.is_symlink()
    except OSError:
        return False


def _collect(marker_dir: Path, found: list[Path]) -> None:
    settings_file = marker_dir / SETTINGS_FILENAME
    try:
        exists = settings_file.is_file()
    except OSError as exc:
        logger.debug("Skipping %s: %s", settings_file, exc)
        return
    if exists:
        found.append(settings_file)
