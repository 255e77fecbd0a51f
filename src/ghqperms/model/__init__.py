"""Core data models for ghqperms."""

from .entities import AggregatedReport, ProjectResult, ScanResult

__all__ = ["AggregatedReport", "ProjectResult", "ScanResult"]
