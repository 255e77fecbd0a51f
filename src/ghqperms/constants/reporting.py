"""Reporting constants and output format identifiers."""

from __future__ import annotations

from ghqperms.constants.discovery import MARKER_DIR_NAME, SETTINGS_FILENAME

OUTPUT_FORMAT_TEXT: str = "text"
OUTPUT_FORMAT_JSON: str = "json"
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({OUTPUT_FORMAT_TEXT, OUTPUT_FORMAT_JSON})

MODE_ALLOW: str = "allow"
MODE_DENY: str = "deny"
VALID_MODES: frozenset[str] = frozenset({MODE_ALLOW, MODE_DENY})

JSON_INDENT: int = 2

NO_FILES_FOUND_MESSAGE: str = f"No {MARKER_DIR_NAME}/{SETTINGS_FILENAME} files found"
