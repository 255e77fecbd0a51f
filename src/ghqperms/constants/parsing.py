"""Schema and message prefixes for settings-file parsing."""

from __future__ import annotations

from typing import Any

READ_ERROR_PREFIX: str = "failed to read file"
PARSE_ERROR_PREFIX: str = "failed to parse"

_NULLABLE_STRING_LIST: dict[str, Any] = {
    "type": ["array", "null"],
    "items": {"type": "string"},
}

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "permissions": {
            "type": ["object", "null"],
            "properties": {
                "allow": _NULLABLE_STRING_LIST,
                "deny": _NULLABLE_STRING_LIST,
            },
        },
    },
}
