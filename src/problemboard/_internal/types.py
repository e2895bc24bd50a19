"""Shared type aliases used across problemboard modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# View — external renderer bound to a route, sync or async
View: TypeAlias = Callable[..., Any]

# Parsed JSON value as returned by the backend
JSON: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None
