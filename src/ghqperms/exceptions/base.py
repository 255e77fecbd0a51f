"""Base exception for ghqperms."""

from __future__ import annotations


class GhqPermsError(Exception):
    """Base class for all ghqperms errors."""
