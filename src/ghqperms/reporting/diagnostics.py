"""Opt-in diagnostics for files left out of a report."""

from __future__ import annotations

import logging
from pathlib import Path

from ghqperms.model import ScanResult

logger = logging.getLogger(__name__)


def _path_for_log(scan: ScanResult, path: Path) -> str:
    """Render a log-friendly path relative to the scan root when possible."""
    try:
        return path.relative_to(scan.root).as_posix()
    except ValueError:
        return path.as_posix()


def log_scan_diagnostics(scan: ScanResult) -> None:
    """Log each skipped file and a one-line summary at INFO level."""
    for path, error in sorted(scan.errors.items()):
        logger.info("Skipped %s: %s", _path_for_log(scan, path), error)
    logger.info(
        "Scanned %d settings file(s) under %s: %d parsed, %d skipped",
        len(scan.candidates),
        scan.root,
        scan.parsed_files,
        scan.skipped_files,
    )
