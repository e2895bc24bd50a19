"""Tests for problemboard.contracts — route params vs. view signatures."""

from problemboard.contracts import Severity, check_routes
from problemboard.routing.route import Route
from problemboard.routing.router import Router
from problemboard.routing.table import build_router


def _router(*routes: Route) -> Router:
    r = Router()
    for route in routes:
        r.add(route)
    r.compile()
    return r


def test_application_table_is_clean() -> None:
    def climb_view(board: str, problemId: str) -> None:  # noqa: N803
        pass

    router = build_router(home=lambda: None, create_problem=lambda: None, climb_view=climb_view)
    assert check_routes(router) == []


def test_var_keyword_view_accepts_everything() -> None:
    def view(**props: str) -> None:
        pass

    assert check_routes(_router(Route("/:board/:problemId", "ClimbView", view, props=True))) == []


def test_unaccepted_param() -> None:
    def view(board: str) -> None:
        pass

    issues = check_routes(_router(Route("/:board/:problemId", "ClimbView", view, props=True)))
    assert len(issues) == 1
    assert issues[0].severity is Severity.ERROR
    assert issues[0].category == "unaccepted_param"
    assert "problemId" in issues[0].message


def test_missing_param() -> None:
    def view(board: str, problemId: str, size: str) -> None:  # noqa: N803
        pass

    issues = check_routes(_router(Route("/:board/:problemId", "ClimbView", view, props=True)))
    assert [i.category for i in issues] == ["missing_param"]
    assert "'size'" in issues[0].message


def test_optional_extra_param_is_fine() -> None:
    def view(board: str, problemId: str, size: str = "12x12") -> None:  # noqa: N803
        pass

    assert check_routes(_router(Route("/:board/:problemId", "ClimbView", view, props=True))) == []


def test_dropped_params_warning() -> None:
    issues = check_routes(_router(Route("/:board/:problemId", "ClimbView", lambda: None)))
    assert len(issues) == 1
    assert issues[0].severity is Severity.WARNING
    assert issues[0].category == "dropped_params"
    assert issues[0].route == "/:board/:problemId"


def test_static_route_without_props() -> None:
    assert check_routes(_router(Route("/create", "CreateProblem", lambda: None))) == []
