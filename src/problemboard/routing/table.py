"""The board application's route table.

``/`` lists problems, ``/create`` hosts the problem editor, and
``/:board/:problemId`` shows a single problem on its board.
"""

from problemboard._internal.types import View
from problemboard.routing.history import History
from problemboard.routing.route import Route
from problemboard.routing.router import Router

HOME = "Home"
CREATE_PROBLEM = "CreateProblem"
CLIMB_VIEW = "ClimbView"


def build_router(
    *,
    home: View,
    create_problem: View,
    climb_view: View,
    history: History | None = None,
) -> Router:
    """Return a compiled router bound to the given views.

    ``climb_view`` receives ``board`` and ``problemId`` as keyword arguments.
    """
    router = Router(history=history)
    router.add(Route("/", HOME, home))
    router.add(Route("/create", CREATE_PROBLEM, create_problem))
    router.add(Route("/:board/:problemId", CLIMB_VIEW, climb_view, props=True))
    router.compile()
    return router
