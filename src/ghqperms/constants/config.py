"""Configuration defaults, filenames and allowed keys."""

from __future__ import annotations

from ghqperms.constants.reporting import MODE_ALLOW, OUTPUT_FORMAT_TEXT
from ghqperms.constants.root import DEFAULT_HELPER_COMMAND

CONFIG_ENV_VAR: str = "GHQPERMS_CONFIG"
XDG_CONFIG_HOME_ENV_VAR: str = "XDG_CONFIG_HOME"
CONFIG_DIRNAME: str = "ghqperms"
CONFIG_FILENAME: str = "config.yaml"

DEFAULT_OUTPUT_FORMAT: str = OUTPUT_FORMAT_TEXT
DEFAULT_MODE: str = MODE_ALLOW
DEFAULT_JOBS: int = 1
DEFAULT_HELPER_COMMAND_CONFIG: tuple[str, ...] = DEFAULT_HELPER_COMMAND

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "ghq_root",
        "helper_command",
        "output_format",
        "mode",
        "jobs",
    }
)
