"""Constants for settings-file discovery."""

from __future__ import annotations

MARKER_DIR_NAME: str = ".claude"
SETTINGS_FILENAME: str = "settings.local.json"

# root/<host>/<owner>/<repo>/.claude
MAX_SEARCH_DEPTH: int = 4
