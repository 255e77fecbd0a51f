"""Text and JSON renderers for aggregated permission reports."""

from __future__ import annotations

import json
from collections.abc import Iterable

from ghqperms.constants.reporting import (
    JSON_INDENT,
    NO_FILES_FOUND_MESSAGE,
    OUTPUT_FORMAT_JSON,
    OUTPUT_FORMAT_TEXT,
    VALID_OUTPUT_FORMATS,
)
from ghqperms.model import AggregatedReport, ProjectResult, ScanResult
from ghqperms.reporting.aggregate import aggregate
from ghqperms.types import OutputFormat, PermissionMode


def render_text(report: AggregatedReport) -> str:
    """One entry per line, no decoration."""
    return "\n".join(report.entries)


def render_json(report: AggregatedReport) -> str:
    """Pretty-printed ``{"permissions": {"<mode>": [...]}}``."""
    return json.dumps(report.to_dict(), indent=JSON_INDENT, ensure_ascii=False)


def render_report(report: AggregatedReport, output_format: OutputFormat) -> str:
    if output_format == OUTPUT_FORMAT_JSON:
        return render_json(report)
    if output_format == OUTPUT_FORMAT_TEXT:
        return render_text(report)
    raise ValueError(
        f"Unknown output format: {output_format!r}. Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}"
    )


def render(results: Iterable[ProjectResult], mode: PermissionMode, output_format: OutputFormat) -> str:
    """Aggregate ``results`` for ``mode`` and render them in ``output_format``."""
    return render_report(aggregate(results, mode), output_format)


def render_scan(scan: ScanResult, mode: PermissionMode, output_format: OutputFormat) -> str:
    """Render a whole scan, replacing the report with a notice when no files were found."""
    if not scan.found_files:
        return NO_FILES_FOUND_MESSAGE
    return render(scan.results, mode, output_format)
