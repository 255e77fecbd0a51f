"""Branding constants for terminal output."""

from __future__ import annotations

from ghqperms.constants.discovery import MARKER_DIR_NAME, SETTINGS_FILENAME

BRAND_NAME: str = "ghqperms"
CLI_DESCRIPTION: str = (
    f"Collect the permission entries declared in every {MARKER_DIR_NAME}/{SETTINGS_FILENAME}\n"
    "under your ghq root and print them as one sorted, deduplicated list."
)
