"""Configuration loading and validation for ghqperms."""

from __future__ import annotations

from ghqperms.config.loader import default_config_path, load_config
from ghqperms.config.model import GhqPermsConfig

__all__ = ["GhqPermsConfig", "default_config_path", "load_config"]
