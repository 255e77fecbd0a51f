"""Shared constants for ghqperms."""
