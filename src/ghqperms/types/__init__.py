"""Shared type aliases for ghqperms."""

from .common import JsonObject, JsonScalar, JsonValue, OutputFormat, PermissionMode, RootHelper

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutputFormat",
    "PermissionMode",
    "RootHelper",
]
