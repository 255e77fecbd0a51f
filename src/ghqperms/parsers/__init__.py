"""Parsers for project settings files."""

from .settings import extract, parse_settings_document

__all__ = ["extract", "parse_settings_document"]
