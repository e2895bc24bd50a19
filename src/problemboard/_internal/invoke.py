"""Invoke helpers — call sync or async views uniformly.

Views bound in the route table can be ``def`` or ``async def``. The
router calls them through this helper so the sync/async check lives in
exactly one place.

Usage::

    from problemboard._internal.invoke import invoke

    result = await invoke(view, **params)
"""

import inspect
from typing import Any


async def invoke(view: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a view and await the result if it's awaitable."""
    result = view(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
