"""Merge per-project results into one sorted, deduplicated report."""

from __future__ import annotations

from collections.abc import Iterable

from ghqperms.model import AggregatedReport, ProjectResult
from ghqperms.types import PermissionMode


def aggregate(results: Iterable[ProjectResult], mode: PermissionMode) -> AggregatedReport:
    """Collect the ``mode`` entries of every successful result.

    Entries are deduplicated by exact string equality and sorted by code point,
    so the report does not depend on discovery or parsing order.
    """
    unique: set[str] = set()
    for result in results:
        if not result.ok:
            continue
        unique.update(result.entries(mode))
    return AggregatedReport(mode=mode, entries=tuple(sorted(unique)))
