"""Constants for resolving the repository root."""

from __future__ import annotations

DEFAULT_HELPER_COMMAND: tuple[str, ...] = ("ghq", "root")
