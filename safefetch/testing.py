"""
Testing utilities for code that fetches through safefetch.
Use these tools to exercise your error handling without making real requests.
"""
from typing import Any, Dict, List, Optional, Tuple, Union

import httpx

from .transport.base import Transport
from .types import Target


class MockTransport(Transport):
    """
    A transport that replays pre-configured responses and errors in order.
    Every call is recorded in ``requests`` as a ``(target, options)`` pair.
    """
    def __init__(self):
        self._results: List[Union[httpx.Response, Exception]] = []
        self.requests: List[Tuple[Target, Any]] = []

    def add_response(
        self, content: str = "", status_code: int = 200, headers: Dict[str, str] = None
    ) -> httpx.Response:
        """Queue a response and return it, so tests can check identity."""
        response = httpx.Response(status_code, headers=headers, content=content.encode("utf-8"))
        self._results.append(response)
        return response

    def add_error(self, error: Exception):
        """Queue an error to be raised by the next call."""
        self._results.append(error)

    def _next(self, target: Target, options: Optional[Any]) -> httpx.Response:
        self.requests.append((target, options))
        if not self._results:
            return httpx.Response(200)

        item = self._results.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    async def fetch(self, target: Target, options: Optional[Any] = None) -> httpx.Response:
        return self._next(target, options)

    def fetch_sync(self, target: Target, options: Optional[Any] = None) -> httpx.Response:
        return self._next(target, options)
