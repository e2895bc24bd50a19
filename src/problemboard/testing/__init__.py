"""Testing utilities for problemboard.

Provides a fake backend that records requests and serves canned JSON
through ``httpx.MockTransport``.
"""

from problemboard.testing.backend import FakeBackend, RecordedRequest

__all__ = ["FakeBackend", "RecordedRequest"]
