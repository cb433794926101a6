from typing import Any, Optional, Protocol

import httpx

from ..types import Target


class Transport(Protocol):
    """
    Abstract interface for a fetch-capable network transport.
    """

    async def fetch(self, target: Target, options: Optional[Any] = None) -> httpx.Response:
        """Perform an asynchronous request."""
        ...

    def fetch_sync(self, target: Target, options: Optional[Any] = None) -> httpx.Response:
        """Perform a synchronous request."""
        ...
