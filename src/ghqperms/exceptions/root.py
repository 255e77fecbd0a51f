"""Root-resolution exceptions."""

from __future__ import annotations

from ghqperms.exceptions.base import GhqPermsError


class ExternalToolError(GhqPermsError):
    """Raised when the repository-root helper cannot produce a root path."""
