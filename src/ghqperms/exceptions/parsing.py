"""Parsing-related exceptions."""

from __future__ import annotations

from ghqperms.exceptions.base import GhqPermsError


class SettingsParseError(GhqPermsError, ValueError):
    """Raised when a settings file does not hold a valid settings document."""
