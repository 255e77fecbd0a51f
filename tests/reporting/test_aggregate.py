"""Tests for permission aggregation."""

from __future__ import annotations

from pathlib import Path

from ghqperms.model import ProjectResult
from ghqperms.reporting import aggregate


def _ok(name: str, allow: list[str] | None = None, deny: list[str] | None = None) -> ProjectResult:
    return ProjectResult.from_permissions(Path(name), allow=allow or [], deny=deny or [])


def test_entries_are_deduplicated_and_sorted() -> None:
    results = [
        _ok("a", allow=["Read(*)", "Bash(ls)"]),
        _ok("b", allow=["Bash(ls)", "Bash(git status)", "Read(*)"]),
        _ok("c", allow=["Bash(ls)"]),
    ]

    report = aggregate(results, "allow")

    assert report.mode == "allow"
    assert report.entries == ("Bash(git status)", "Bash(ls)", "Read(*)")


def test_failed_results_are_excluded() -> None:
    results = [_ok("a", allow=["Bash(ls)"]), ProjectResult.from_error(Path("b"), "failed to parse: x")]

    assert aggregate(results, "allow").entries == ("Bash(ls)",)


def test_deny_mode_ignores_allow_entries() -> None:
    results = [_ok("a", deny=["Bash(rm)"]), _ok("b", allow=["Bash(ls)"])]

    assert aggregate(results, "deny").entries == ("Bash(rm)",)


def test_sorting_is_by_code_point_not_locale() -> None:
    results = [_ok("a", allow=["b", "B", "a", "_", "Z", "é"])]

    assert aggregate(results, "allow").entries == ("B", "Z", "_", "a", "b", "é")


def test_deduplication_is_exact_string_equality() -> None:
    results = [_ok("a", allow=["Bash(ls)", "bash(ls)", "Bash(ls) "])]

    assert len(aggregate(results, "allow").entries) == 3


def test_no_results_produces_empty_report() -> None:
    assert aggregate([], "allow").entries == ()


def test_order_of_results_does_not_matter() -> None:
    results = [_ok("a", allow=["Z", "A"]), _ok("b", allow=["M"])]

    assert aggregate(results, "allow") == aggregate(list(reversed(results)), "allow")
