"""Route table contracts — validate routes against the views they bind.

A route's path parameters are only useful if its view can receive them.
``check_routes`` inspects each view's signature and reports:

1. **Unaccepted params**: a ``props`` route whose view cannot take one of
   the path parameters as a keyword argument (error).
2. **Missing params**: a view with a required parameter no path segment
   supplies (error).
3. **Dropped params**: a route with path parameters but ``props=False``,
   so the view never sees them (warning).

Usage::

    router = build_router(home=home, create_problem=create, climb_view=climb)
    for issue in check_routes(router):
        print(f"{issue.severity.value}: {issue.message}")
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from problemboard.routing.router import parse_path

if TYPE_CHECKING:
    from problemboard.routing.route import Route
    from problemboard.routing.router import Router


class Severity(Enum):
    """Severity of a contract validation issue."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class ContractIssue:
    """A single validation issue found during contract checking."""

    severity: Severity
    category: str
    message: str
    route: str | None = None


def _check_route(route: Route) -> list[ContractIssue]:
    params = [seg.param_name for seg in parse_path(route.path) if seg.is_param]

    if not route.props:
        if params:
            return [
                ContractIssue(
                    severity=Severity.WARNING,
                    category="dropped_params",
                    message=(
                        f"Route '{route.path}' has path parameters {params} "
                        f"but does not forward them to its view."
                    ),
                    route=route.path,
                )
            ]
        return []

    try:
        signature = inspect.signature(route.view)
    except (TypeError, ValueError):
        # Builtins and some C callables have no introspectable signature
        return []

    issues: list[ContractIssue] = []
    accepts_var_kw = any(
        p.kind is inspect.Parameter.VAR_KEYWORD for p in signature.parameters.values()
    )
    keyword_names = {
        name
        for name, p in signature.parameters.items()
        if p.kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
    }

    for name in params:
        if name not in keyword_names and not accepts_var_kw:
            issues.append(
                ContractIssue(
                    severity=Severity.ERROR,
                    category="unaccepted_param",
                    message=f"View for route '{route.path}' does not accept parameter '{name}'.",
                    route=route.path,
                )
            )

    for name, p in signature.parameters.items():
        if p.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        if p.default is inspect.Parameter.empty and name not in params:
            issues.append(
                ContractIssue(
                    severity=Severity.ERROR,
                    category="missing_param",
                    message=(
                        f"View for route '{route.path}' requires '{name}', "
                        f"which the path does not supply."
                    ),
                    route=route.path,
                )
            )

    return issues


def check_routes(router: Router) -> list[ContractIssue]:
    """Check every route in *router* against its view's signature."""
    issues: list[ContractIssue] = []
    for route in router.routes:
        issues.extend(_check_route(route))
    return issues
