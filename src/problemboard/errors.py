"""problemboard exception hierarchy.

Shared across the router and the API client so every module raises and
catches the same types.
"""

from typing import Any


class ProblemBoardError(Exception):
    """Base for all problemboard-specific errors."""


class ConfigurationError(ProblemBoardError):
    """Raised when a route table is invalid.

    Typically raised by ``Router.add()`` while the table is being built.
    """


class NotFound(ProblemBoardError):  # noqa: N818 — conventional name for routers
    """No route matches the requested path or route name."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail or f"No route matches {path!r}"
        super().__init__(self.detail)


class APIError(ProblemBoardError):
    """Raised when the backend answers with a non-2xx status.

    ``str(error)`` is the server-supplied ``error`` message, or the
    generic fallback when the payload carries none.
    """

    def __init__(self, message: str, *, status: int, payload: Any = None) -> None:
        self.message = message
        self.status = status
        self.payload = payload
        super().__init__(message)
