"""API client configuration.

ClientConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """API client configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ClientConfig(origin="https://boards.example.com")
    """

    # Backend
    origin: str = "http://127.0.0.1:8000"
    api_base: str = "/api"

    # Requests
    default_method: str = "POST"
    headers: tuple[tuple[str, str], ...] = (("Content-Type", "application/json"),)

    # None disables the httpx timeout; a hung call stalls only its caller
    timeout: float | None = None

    def url(self, endpoint: str) -> str:
        """Return the path for *endpoint* under ``api_base``."""
        return f"{self.api_base}{endpoint}"
