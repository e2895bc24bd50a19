"""JSON-over-HTTP client for the board backend.

Every call goes to ``<origin><api_base><endpoint>`` and parses the
response body as JSON whatever the status. Non-2xx responses become
``APIError`` carrying the server's ``error`` message.

Concurrency:
    - Calls are independent; the shared httpx.AsyncClient is the only
      state and httpx handles concurrent requests on it
    - No retries, no timeout unless ``ClientConfig.timeout`` sets one
"""

import json
import logging
from typing import Any

import httpx

from problemboard._internal.types import JSON
from problemboard.config import ClientConfig
from problemboard.errors import APIError

logger = logging.getLogger("problemboard.api")

FALLBACK_ERROR = "API request failed"


def encode_body(body: Any) -> bytes:
    """Serialize a structured body the way ``JSON.stringify`` does.

    Compact separators, non-ASCII characters left unescaped.
    """
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def error_message(payload: Any) -> str:
    """Pick the server-supplied ``error`` string, or the generic fallback.

    Empty or non-string ``error`` values fall back.
    """
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, str) and error:
            return error
    return FALLBACK_ERROR


class ApiClient:
    """Async JSON API client.

    Usage::

        async with ApiClient(ClientConfig(origin="http://localhost:8000")) as api:
            problems = await api.request(
                "/Problem/getProblemsByBoard", body={"board": "kilter"}
            )

    Pass ``transport`` to route requests somewhere other than the network
    (``httpx.MockTransport`` in tests).
    """

    __slots__ = ("_http", "config")

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._http = httpx.AsyncClient(
            base_url=self.config.origin,
            headers=dict(self.config.headers),
            timeout=self.config.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        endpoint: str,
        *,
        method: str | None = None,
        headers: dict[str, str] | None = None,
        body: Any = None,
    ) -> JSON:
        """Send one request and return the parsed JSON response.

        A structured *body* is serialized to JSON and sent with a JSON
        content type; a ``str`` or ``bytes`` body is sent unchanged.

        Raises ``APIError`` on a non-2xx status, ``json.JSONDecodeError``
        when a 2xx body is not JSON, and ``httpx.HTTPError`` on transport
        failure. Each failure is logged once before it propagates.
        """
        method = (method or self.config.default_method).upper()
        url = self.config.url(endpoint)
        request_headers = httpx.Headers(headers)

        content: bytes | str | None
        if body is None or isinstance(body, (str, bytes)):
            content = body
        else:
            content = encode_body(body)
            request_headers["Content-Type"] = "application/json"

        try:
            response = await self._http.request(
                method, url, content=content, headers=request_headers
            )
            if response.is_success:
                return response.json()

            try:
                payload = response.json()
            except ValueError:
                payload = None
            raise APIError(error_message(payload), status=response.status_code, payload=payload)
        except Exception as exc:
            logger.error("API error: %s %s: %s", method, url, exc)
            raise
