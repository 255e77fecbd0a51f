"""Command-line interface for ghqperms."""
