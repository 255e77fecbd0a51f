"""Immutable entities produced by a settings scan."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ghqperms.constants.reporting import MODE_DENY
from ghqperms.types import JsonObject, PermissionMode


@dataclass(frozen=True)
class ProjectResult:
    """Outcome of processing one settings file.

    When ``error`` is set both permission tuples are empty: a file that failed
    to read or parse never contributes partial data.
    """

    path: Path
    allow: tuple[str, ...] = ()
    deny: tuple[str, ...] = ()
    error: str | None = None

    def __post_init__(self) -> None:
        if self.error is not None and (self.allow or self.deny):
            raise ValueError("a failed ProjectResult cannot carry permissions")

    @classmethod
    def from_permissions(
        cls,
        path: Path,
        allow: list[str] | tuple[str, ...] = (),
        deny: list[str] | tuple[str, ...] = (),
    ) -> ProjectResult:
        """Build a successful result."""
        return cls(path=path, allow=tuple(allow), deny=tuple(deny))

    @classmethod
    def from_error(cls, path: Path, error: str) -> ProjectResult:
        """Build a failed result carrying only the error description."""
        return cls(path=path, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def entries(self, mode: PermissionMode) -> tuple[str, ...]:
        """Return the permission entries for ``mode``."""
        return self.deny if mode == MODE_DENY else self.allow


@dataclass(frozen=True)
class AggregatedReport:
    """Sorted, deduplicated permission entries for a single mode."""

    mode: PermissionMode
    entries: tuple[str, ...] = ()

    def to_dict(self) -> JsonObject:
        return {"permissions": {self.mode: list(self.entries)}}


@dataclass(frozen=True)
class ScanResult:
    """Everything one scan discovered, before rendering."""

    root: Path
    candidates: tuple[Path, ...] = ()
    results: tuple[ProjectResult, ...] = ()

    @property
    def found_files(self) -> bool:
        return bool(self.candidates)

    @property
    def parsed_files(self) -> int:
        return sum(1 for result in self.results if result.ok)

    @property
    def skipped_files(self) -> int:
        return len(self.results) - self.parsed_files

    @property
    def errors(self) -> dict[Path, str]:
        """Map each skipped file to its error description."""
        return {result.path: result.error for result in self.results if result.error is not None}
