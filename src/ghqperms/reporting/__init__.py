"""Reporting package for ghqperms outputs."""

from __future__ import annotations

from .aggregate import aggregate
from .render import render, render_report, render_scan

__all__ = ["aggregate", "render", "render_report", "render_scan"]
