"""Scanner package: root resolution, discovery and orchestration."""

from __future__ import annotations

from typing import Any

__all__ = ["find_settings", "resolve_root", "scan_settings"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name == "scan_settings":
        from .orchestrator import scan_settings

        return scan_settings
    if name == "find_settings":
        from .discovery import find_settings

        return find_settings
    if name == "resolve_root":
        from .root import resolve_root

        return resolve_root
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
