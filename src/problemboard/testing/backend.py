"""In-memory backend for exercising ApiClient without a network.

Wraps ``httpx.MockTransport``: canned JSON responses are registered per
endpoint path and every outgoing request is recorded for assertions.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

from problemboard.api.client import ApiClient
from problemboard.config import ClientConfig


@dataclass(frozen=True, slots=True)
class RecordedRequest:
    """One request as the backend saw it."""

    method: str
    path: str
    headers: httpx.Headers
    content: bytes

    def json(self) -> Any:
        return json.loads(self.content)


class FakeBackend:
    __test__ = False  # Tell pytest this is not a test class
    """Fake board backend.

    Usage::

        backend = FakeBackend()
        backend.respond("/api/Problem/getProblemsByBoard", [{"name": "Crimpy"}])

        async with backend.client() as api:
            await api.request("/Problem/getProblemsByBoard", body={"board": "kilter"})

        assert backend.requests[0].json() == {"board": "kilter"}

    Unregistered paths answer ``404 {"error": "Not Found"}``.
    """

    __slots__ = ("_responses", "requests")

    def __init__(self) -> None:
        self._responses: dict[str, Callable[[], httpx.Response] | Exception] = {}
        self.requests: list[RecordedRequest] = []

    def respond(self, path: str, payload: Any, *, status: int = 200) -> None:
        """Answer *path* with *payload* serialized as JSON (``None`` becomes ``null``)."""
        self.respond_raw(path, json.dumps(payload), status=status, content_type="application/json")

    def respond_raw(
        self, path: str, content: bytes | str, *, status: int = 200, content_type: str = "text/plain"
    ) -> None:
        """Answer *path* with *content* as-is."""
        self._responses[path] = lambda: httpx.Response(
            status, content=content, headers={"Content-Type": content_type}
        )

    def fail(self, path: str, exc: Exception) -> None:
        """Raise *exc* from the transport for *path* (connection errors etc.)."""
        self._responses[path] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.url.path,
                headers=request.headers,
                content=request.content,
            )
        )
        answer = self._responses.get(request.url.path)
        if answer is None:
            return httpx.Response(404, json={"error": "Not Found"})
        if isinstance(answer, Exception):
            raise answer
        return answer()

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self, config: ClientConfig | None = None) -> ApiClient:
        """Return an ApiClient wired to this backend."""
        return ApiClient(config, transport=self.transport())
