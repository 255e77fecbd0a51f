"""Parser for ``.claude/settings.local.json`` permission settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from ghqperms.constants.parsing import PARSE_ERROR_PREFIX, READ_ERROR_PREFIX, SETTINGS_SCHEMA
from ghqperms.exceptions import SettingsParseError
from ghqperms.model import ProjectResult

logger = logging.getLogger(__name__)

_VALIDATOR = Draft202012Validator(SETTINGS_SCHEMA)


def extract(path: Path) -> ProjectResult:
    """Read one settings file and return its permissions.

    Never raises: read and parse failures are returned as a failed
    :class:`ProjectResult` so one broken file cannot affect any other.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return ProjectResult.from_error(path, f"{READ_ERROR_PREFIX}: {exc}")

    try:
        allow, deny = parse_settings_document(content)
    except SettingsParseError as exc:
        logger.debug("Cannot parse %s: %s", path, exc)
        return ProjectResult.from_error(path, f"{PARSE_ERROR_PREFIX}: {exc}")

    return ProjectResult.from_permissions(path, allow=allow, deny=deny)


def parse_settings_document(content: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Parse settings JSON text into ``(allow, deny)`` tuples.

    Every field is optional and may be ``null``; unknown keys are ignored.
    Documents a strict JSON reader rejects are rejected here too: ``NaN`` and
    ``Infinity`` literals, a repeated settings key, and strings holding lone
    surrogates.
    """
    try:
        payload = json.loads(content, parse_constant=_reject_constant, object_pairs_hook=_JsonObject.from_pairs)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise SettingsParseError(str(exc)) from exc

    error = best_match(_VALIDATOR.iter_errors(payload))
    if error is not None:
        location = "/".join(str(part) for part in error.absolute_path)
        raise SettingsParseError(f"{location}: {error.message}" if location else error.message)

    _reject_duplicates(payload, ("permissions",), "")
    permissions: dict[str, Any] = payload.get("permissions") or {}
    _reject_duplicates(permissions, ("allow", "deny"), "permissions/")

    allow = tuple(permissions.get("allow") or ())
    deny = tuple(permissions.get("deny") or ())
    _reject_unencodable(allow, "permissions/allow")
    _reject_unencodable(deny, "permissions/deny")
    return allow, deny


class _JsonObject(dict[str, Any]):
    """JSON object that remembers which keys appeared more than once."""

    duplicate_keys: frozenset[str] = frozenset()

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, Any]]) -> _JsonObject:
        obj = cls(pairs)
        if len(obj) != len(pairs):
            seen: set[str] = set()
            duplicates: set[str] = set()
            for key, _ in pairs:
                if key in seen:
                    duplicates.add(key)
                seen.add(key)
            obj.duplicate_keys = frozenset(duplicates)
        return obj


def _reject_constant(name: str) -> Any:
    raise SettingsParseError(f"invalid JSON literal {name}")


def _reject_duplicates(obj: dict[str, Any], keys: tuple[str, ...], prefix: str) -> None:
    duplicates = getattr(obj, "duplicate_keys", frozenset())
    for key in keys:
        if key in duplicates:
            raise SettingsParseError(f"duplicate field `{prefix}{key}`")


def _reject_unencodable(entries: tuple[str, ...], location: str) -> None:
    for index, entry in enumerate(entries):
        try:
            entry.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise SettingsParseError(f"{location}/{index}: {exc.reason}") from exc
