"""Problem endpoints bound to an ApiClient.

Each operation packs its positional arguments into the request body and
forwards them unvalidated; the backend owns validation.
"""

from typing import Any

from problemboard._internal.types import JSON
from problemboard.api.client import ApiClient

CREATE_PROBLEM = "/Problem/createProblem"
GET_PROBLEMS_BY_BOARD = "/Problem/getProblemsByBoard"
GET_PROBLEMS_BY_GRADE = "/Problem/getProblemsByGrade"


class ProblemAPI:
    """Problem operations.

    Usage::

        problems = ProblemAPI(api)
        await problems.create_problem("Crimpy", 5, [[1, 2]], "kilter", "alice")
        kilter = await problems.get_problems_by_board("kilter")
    """

    __slots__ = ("client",)

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def create_problem(
        self, name: str, grade: Any, holds: Any, board: str, setter: str
    ) -> JSON:
        return await self.client.request(
            CREATE_PROBLEM,
            body={"name": name, "grade": grade, "holds": holds, "board": board, "setter": setter},
        )

    async def get_problems_by_board(self, board: str) -> JSON:
        return await self.client.request(GET_PROBLEMS_BY_BOARD, body={"board": board})

    async def get_problems_by_grade(self, grade: Any) -> JSON:
        return await self.client.request(GET_PROBLEMS_BY_GRADE, body={"grade": grade})
