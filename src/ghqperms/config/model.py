"""Config data model for ghqperms."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ghqperms.constants.config import (
    DEFAULT_HELPER_COMMAND_CONFIG,
    DEFAULT_JOBS,
    DEFAULT_MODE,
    DEFAULT_OUTPUT_FORMAT,
)
from ghqperms.types import OutputFormat, PermissionMode


@dataclass(frozen=True)
class GhqPermsConfig:
    """Resolved config."""

    ghq_root: Path | None = None
    helper_command: tuple[str, ...] = DEFAULT_HELPER_COMMAND_CONFIG
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT  # type: ignore[assignment]
    mode: PermissionMode = DEFAULT_MODE  # type: ignore[assignment]
    jobs: int = DEFAULT_JOBS
