"""Resolve the directory that holds all locally cloned repositories."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from functools import partial
from pathlib import Path

from ghqperms.constants.root import DEFAULT_HELPER_COMMAND
from ghqperms.exceptions import ExternalToolError
from ghqperms.types import RootHelper

logger = logging.getLogger(__name__)


def run_root_helper(command: Sequence[str] = DEFAULT_HELPER_COMMAND) -> str:
    """Run the root helper once and return its raw stdout.

    Raises :class:`ExternalToolError` if the command cannot be spawned, exits
    non-zero, or prints something that is not UTF-8 text.
    """
    rendered = " ".join(command)
    logger.debug("Running root helper: %s", rendered)
    try:
        proc = subprocess.run(list(command), capture_output=True, check=False)
    except OSError as exc:
        raise ExternalToolError(f"Failed to execute '{rendered}' command: {exc}") from exc

    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        message = f"'{rendered}' command failed with exit status {proc.returncode}"
        if stderr:
            message = f"{message}: {stderr}"
        raise ExternalToolError(message)

    try:
        return proc.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ExternalToolError(f"Failed to parse '{rendered}' output: {exc}") from exc


def command_helper(command: Sequence[str]) -> RootHelper:
    """Bind a helper command into a zero-argument root helper."""
    return partial(run_root_helper, tuple(command))


def resolve_root(override: Path | None = None, *, helper: RootHelper | None = None) -> Path:
    """Return the scan root, asking the helper only when no override is given."""
    if override is not None:
        return override

    output = (helper or run_root_helper)().strip()
    if not output:
        raise ExternalToolError("root helper printed an empty path")
    logger.debug("Resolved root from helper: %s", output)
    return Path(output)
