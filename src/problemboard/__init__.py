"""problemboard — client for a climbing-board problem browser.

Two independent parts: a route table mapping navigation paths to views,
and an async JSON API client for the board backend.

Basic usage::

    from problemboard import ApiClient, ProblemAPI, build_router

    router = build_router(home=home, create_problem=editor, climb_view=climb)
    page = await router.push("/kilter/42")

    async with ApiClient() as api:
        problems = await ProblemAPI(api).get_problems_by_board("kilter")
"""

__version__ = "0.1.0"
__all__ = [
    "APIError",
    "ApiClient",
    "ClientConfig",
    "ConfigurationError",
    "History",
    "NotFound",
    "ProblemAPI",
    "ProblemBoardError",
    "Route",
    "RouteMatch",
    "Router",
    "build_router",
    "check_routes",
]

# Maps public name -> (module, attribute)
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "APIError": ("problemboard.errors", "APIError"),
    "ApiClient": ("problemboard.api.client", "ApiClient"),
    "ClientConfig": ("problemboard.config", "ClientConfig"),
    "ConfigurationError": ("problemboard.errors", "ConfigurationError"),
    "History": ("problemboard.routing.history", "History"),
    "NotFound": ("problemboard.errors", "NotFound"),
    "ProblemAPI": ("problemboard.api.problems", "ProblemAPI"),
    "ProblemBoardError": ("problemboard.errors", "ProblemBoardError"),
    "Route": ("problemboard.routing.route", "Route"),
    "RouteMatch": ("problemboard.routing.route", "RouteMatch"),
    "Router": ("problemboard.routing.router", "Router"),
    "build_router": ("problemboard.routing.table", "build_router"),
    "check_routes": ("problemboard.contracts", "check_routes"),
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import problemboard`` fast (httpx loads only with the API client)
    while providing a clean top-level API.
    """
    target = _LAZY_IMPORTS.get(name)
    if target is None:
        msg = f"module 'problemboard' has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    module_name, attr = target
    return getattr(importlib.import_module(module_name), attr)
