"""Shared pytest fixtures for building settings trees in tmp_path."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeAlias

import pytest

SettingsWriter: TypeAlias = Callable[..., Path]


def _write_settings(root: Path, project: str, payload: Any = None, *, raw: str | None = None) -> Path:
    """Write ``<root>/<project>/.claude/settings.local.json`` and return its path."""
    settings_dir = root / project / ".claude"
    settings_dir.mkdir(parents=True, exist_ok=True)
    settings_file = settings_dir / "settings.local.json"
    text = raw if raw is not None else json.dumps(payload)
    settings_file.write_text(text, encoding="utf-8")
    return settings_file


@pytest.fixture()
def ghq_root(tmp_path: Path) -> Path:
    """Return an empty directory standing in for ``ghq root``."""
    root = tmp_path / "ghq"
    root.mkdir()
    return root


@pytest.fixture()
def write_settings(ghq_root: Path) -> SettingsWriter:
    """Return a helper that writes a settings file for a project under ``ghq_root``."""

    def _writer(project: str, payload: Any = None, *, raw: str | None = None) -> Path:
        return _write_settings(ghq_root, project, payload, raw=raw)

    return _writer


@pytest.fixture()
def scenario_root(write_settings: SettingsWriter, ghq_root: Path) -> Path:
    """Two projects with overlapping allow entries."""
    write_settings("a", {"permissions": {"allow": ["Bash(ls)"]}})
    write_settings("b", {"permissions": {"allow": ["Bash(ls)", "Read(*)"]}})
    return ghq_root


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config lookup at an empty directory so user config never leaks into tests."""
    config_home = tmp_path / "xdg-config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("GHQPERMS_CONFIG", raising=False)
    return config_home
