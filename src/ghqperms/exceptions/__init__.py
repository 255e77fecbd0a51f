"""Shared exception hierarchy for ghqperms."""

from __future__ import annotations

from .base import GhqPermsError
from .config import ConfigError
from .parsing import SettingsParseError
from .root import ExternalToolError

__all__ = ["ConfigError", "ExternalToolError", "GhqPermsError", "SettingsParseError"]
