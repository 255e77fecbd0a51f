"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal, TypeAlias

PermissionMode: TypeAlias = Literal["allow", "deny"]
OutputFormat: TypeAlias = Literal["text", "json"]

RootHelper: TypeAlias = Callable[[], str]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
