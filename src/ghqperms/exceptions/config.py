"""Configuration-related exceptions."""

from __future__ import annotations

from ghqperms.exceptions.base import GhqPermsError


class ConfigError(GhqPermsError, ValueError):
    """Raised when configuration is invalid."""
