"""Routing — compiled route table with O(path-depth) matching.

Routes are registered during setup and compiled into an immutable
lookup structure before navigation starts.
"""

from problemboard.routing.history import History
from problemboard.routing.route import PathSegment, Route, RouteMatch
from problemboard.routing.router import Router, parse_path
from problemboard.routing.table import build_router

__all__ = [
    "History",
    "PathSegment",
    "Route",
    "RouteMatch",
    "Router",
    "build_router",
    "parse_path",
]
