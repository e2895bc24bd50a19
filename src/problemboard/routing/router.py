"""Compiled router with trie-based path matching.

Routes are registered during setup and compiled into an immutable
lookup structure before the first navigation.
"""

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, unquote

from problemboard._internal.invoke import invoke
from problemboard.errors import ConfigurationError, NotFound
from problemboard.routing.history import History
from problemboard.routing.route import PathSegment, Route, RouteMatch

logger = logging.getLogger("problemboard.routing")


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/"                   -> []
        "/create"             -> [PathSegment("create")]
        "/:board/:problemId"  -> [PathSegment(":board", is_param=True, param_name="board"),
                                  PathSegment(":problemId", is_param=True, ...)]
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("{") and part.endswith("}"):
            msg = (
                f"Route path {path!r} uses {{param}} syntax. "
                f"Path parameters are written as :param (e.g. '/:board/:problemId')."
            )
            raise ConfigurationError(msg)
        if part.startswith(":"):
            param_name = part[1:]
            if not param_name:
                msg = f"Route path {path!r} has an unnamed parameter segment."
                raise ConfigurationError(msg)
            segments.append(PathSegment(value=part, is_param=True, param_name=param_name))
        else:
            segments.append(PathSegment(value=part))
    return segments


def _split(path: str) -> list[str]:
    """Split a navigation path into decoded parts, dropping query string and fragment."""
    path = path.split("#", 1)[0].split("?", 1)[0]
    return [unquote(p) for p in path.strip("/").split("/") if p]


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("children", "param_child", "route")

    def __init__(self) -> None:
        # Static segment children: "create" -> node
        self.children: dict[str, _TrieNode] = {}
        # Single parameter child (only one param name per level)
        self.param_child: _ParamEdge | None = None
        # Route terminating at this node
        self.route: Route | None = None


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    node: _TrieNode


class Router:
    """Compiled router with trie-based path matching and push-state navigation.

    Usage::

        router = Router()
        router.add(Route("/", "Home", home))
        router.add(Route("/:board/:problemId", "ClimbView", climb_view, props=True))
        router.compile()

        match = router.match("/north/42")
        page = await router.push("/north/42")
    """

    __slots__ = ("_by_name", "_compiled", "_root", "history")

    def __init__(self, history: History | None = None) -> None:
        self._root = _TrieNode()
        self._by_name: dict[str, Route] = {}
        self._compiled = False
        self.history = history if history is not None else History()

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        if route.name in self._by_name:
            msg = f"Duplicate route name {route.name!r} ({route.path!r})."
            raise ConfigurationError(msg)

        node = self._root
        for seg in parse_path(route.path):
            if seg.is_param:
                name = seg.param_name or ""
                if node.param_child is None:
                    node.param_child = _ParamEdge(param_name=name, node=_TrieNode())
                elif node.param_child.param_name != name:
                    msg = (
                        f"Route {route.path!r} names parameter {name!r} where another "
                        f"route already uses {node.param_child.param_name!r}."
                    )
                    raise ConfigurationError(msg)
                node = node.param_child.node
            else:
                node = node.children.setdefault(seg.value, _TrieNode())

        if node.route is not None:
            msg = f"Duplicate route path {route.path!r} (already bound to {node.route.name!r})."
            raise ConfigurationError(msg)

        node.route = route
        self._by_name[route.name] = route

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes, in registration order."""
        return list(self._by_name.values())

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, path: str) -> RouteMatch:
        """Match a navigation path against the route table.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        """
        result = self._match_node(self._root, _split(path), 0, {})
        if result is None:
            raise NotFound(path)
        route, params = result
        return RouteMatch(route=route, params=params)

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> tuple[Route, dict[str, str]] | None:
        """Recursively match path parts against the trie."""
        # All parts consumed — return this node's route
        if index == len(parts):
            if node.route is not None:
                return node.route, params
            return None

        part = parts[index]

        # 1. Try static child first (exact match)
        if part in node.children:
            result = self._match_node(node.children[part], parts, index + 1, params)
            if result is not None:
                return result

        # 2. Try parameter child
        if node.param_child is not None:
            edge = node.param_child
            new_params = {**params, edge.param_name: part}
            return self._match_node(edge.node, parts, index + 1, new_params)

        return None

    def url_for(self, name: str, **params: Any) -> str:
        """Build the path for a named route.

        Raises ``NotFound`` for an unknown name and ``ConfigurationError``
        when a path parameter is missing.
        """
        route = self._by_name.get(name)
        if route is None:
            raise NotFound(name, f"No route named {name!r}")

        parts: list[str] = []
        for seg in parse_path(route.path):
            if not seg.is_param:
                parts.append(seg.value)
                continue
            if seg.param_name not in params:
                msg = f"Route {name!r} requires parameter {seg.param_name!r}."
                raise ConfigurationError(msg)
            parts.append(quote(str(params[seg.param_name]), safe=""))
        return "/" + "/".join(parts)

    # -- Navigation --

    async def render(self, match: RouteMatch) -> Any:
        """Call the matched view, forwarding path params when ``props`` is set."""
        if match.route.props:
            return await invoke(match.route.view, **match.params)
        return await invoke(match.route.view)

    async def push(self, path: str) -> Any:
        """Navigate to *path*, adding a history entry, and render its view."""
        match = self.match(path)
        self.history.push(path)
        logger.debug("push %s -> %s %s", path, match.route.name, match.params)
        return await self.render(match)

    async def replace(self, path: str) -> Any:
        """Navigate to *path*, replacing the current history entry."""
        match = self.match(path)
        self.history.replace(path)
        logger.debug("replace %s -> %s %s", path, match.route.name, match.params)
        return await self.render(match)

    async def back(self) -> Any:
        """Step back in history and render the view there.

        Raises ``NotFound`` without moving the cursor if the entry does not route.
        """
        match = self.match(self.history.peek(-1))
        self.history.back()
        return await self.render(match)

    async def forward(self) -> Any:
        """Step forward in history and render the view there."""
        match = self.match(self.history.peek(1))
        self.history.forward()
        return await self.render(match)
