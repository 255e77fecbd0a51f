"""Config file discovery, loading and validation."""

from __future__ import annotations

import difflib
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ghqperms.config.model import GhqPermsConfig
from ghqperms.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_DIRNAME,
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    DEFAULT_HELPER_COMMAND_CONFIG,
    DEFAULT_JOBS,
    DEFAULT_MODE,
    DEFAULT_OUTPUT_FORMAT,
    XDG_CONFIG_HOME_ENV_VAR,
)
from ghqperms.constants.reporting import VALID_MODES, VALID_OUTPUT_FORMATS
from ghqperms.exceptions import ConfigError

logger = logging.getLogger(__name__)


def default_config_path(environ: Mapping[str, str] | None = None) -> tuple[Path, bool]:
    """Return the config path to try and whether it must exist.

    ``$GHQPERMS_CONFIG`` names a required file. Otherwise the optional
    ``$XDG_CONFIG_HOME/ghqperms/config.yaml`` is used, falling back to
    ``~/.config`` when ``XDG_CONFIG_HOME`` is unset.
    """
    env = os.environ if environ is None else environ
    explicit = env.get(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser(), True
    config_home = env.get(XDG_CONFIG_HOME_ENV_VAR) or str(Path.home() / ".config")
    return Path(config_home) / CONFIG_DIRNAME / CONFIG_FILENAME, False


def load_config(
    config_path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> GhqPermsConfig:
    """Load and validate config from an explicit path or the default location."""
    if config_path is not None:
        path, required = config_path.expanduser(), True
    else:
        path, required = default_config_path(environ)

    if not path.is_file():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        return GhqPermsConfig()

    logger.debug("Loading config from %s", path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        return GhqPermsConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(raw, key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            hint = _suggest_key(str(key), ALLOWED_CONFIG_KEYS)
            raise ConfigError(f"Unknown config key `{key}` in {path}" + (f" ({hint})" if hint else ""))

    ghq_root_raw = raw.get("ghq_root")
    if ghq_root_raw is not None and (not isinstance(ghq_root_raw, str) or not ghq_root_raw.strip()):
        raise ConfigError("ghq_root must be a non-empty string")

    helper_command = _ensure_string_list(
        raw.get("helper_command", list(DEFAULT_HELPER_COMMAND_CONFIG)),
        "helper_command",
    )
    if not helper_command or not all(part.strip() for part in helper_command):
        raise ConfigError("helper_command must be a non-empty list of non-empty strings")

    output_format = raw.get("output_format", DEFAULT_OUTPUT_FORMAT)
    if not isinstance(output_format, str) or output_format not in VALID_OUTPUT_FORMATS:
        raise ConfigError(f"output_format must be one of {sorted(VALID_OUTPUT_FORMATS)}, got {output_format!r}")

    mode = raw.get("mode", DEFAULT_MODE)
    if not isinstance(mode, str) or mode not in VALID_MODES:
        raise ConfigError(f"mode must be one of {sorted(VALID_MODES)}, got {mode!r}")

    jobs = raw.get("jobs", DEFAULT_JOBS)
    if isinstance(jobs, bool) or not isinstance(jobs, int) or jobs <= 0:
        raise ConfigError("jobs must be a positive integer")

    return GhqPermsConfig(
        ghq_root=Path(ghq_root_raw).expanduser() if ghq_root_raw is not None else None,
        helper_command=tuple(helper_command),
        output_format=output_format,  # type: ignore[arg-type]
        mode=mode,  # type: ignore[arg-type]
        jobs=jobs,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
