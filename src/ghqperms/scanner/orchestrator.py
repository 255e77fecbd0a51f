"""End-to-end settings scan: locate candidates, then parse each one."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ghqperms.exceptions import ConfigError
from ghqperms.model import ProjectResult, ScanResult
from ghqperms.parsers import extract
from ghqperms.scanner.discovery import find_settings

logger = logging.getLogger(__name__)


def scan_settings(root: Path, *, jobs: int = 1) -> ScanResult:
    """Discover and parse every settings file under ``root``.

    With ``jobs > 1`` files are parsed on a thread pool. Results are
    collected before aggregation, and aggregation sorts, so the rendered
    report is the same for any ``jobs`` value.
    """
    if jobs < 1:
        raise ConfigError(f"jobs must be a positive integer, got {jobs}")

    candidates = tuple(find_settings(root))
    logger.debug("Found %d settings file(s) under %s", len(candidates), root)
    if not candidates:
        return ScanResult(root=root)

    return ScanResult(root=root, candidates=candidates, results=_parse_all(candidates, jobs))


def _parse_all(candidates: tuple[Path, ...], jobs: int) -> tuple[ProjectResult, ...]:
    if jobs == 1 or len(candidates) == 1:
        return tuple(extract(path) for path in candidates)

    with ThreadPoolExecutor(max_workers=min(jobs, len(candidates))) as pool:
        return tuple(pool.map(extract, candidates))
