"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from problemboard._internal.types import View


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/create``  (is_param=False)
    Param:   ``/:board``  (is_param=True, param_name="board")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``props`` controls whether path parameters are forwarded to the view
    as keyword arguments.
    """

    path: str
    name: str
    view: View
    props: bool = False


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: dict[str, str]
