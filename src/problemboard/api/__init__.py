"""API — JSON request wrapper and the problem endpoints bound to it."""

from problemboard.api.client import ApiClient
from problemboard.api.problems import ProblemAPI

__all__ = ["ApiClient", "ProblemAPI"]
