from typing import Any, Awaitable, Dict, Optional, Protocol, Union

import httpx
from pydantic import BaseModel

# Reserved status for synthesized responses. Outside 100-599 so it can never
# collide with a real HTTP result.
ERROR_STATUS = 10001

Target = Union[str, httpx.URL, httpx.Request]


class Fetch(Protocol):
    """An asynchronous fetch-like callable."""

    def __call__(self, target: Target, options: Optional[Any] = None) -> Awaitable[httpx.Response]:
        ...


class SyncFetch(Protocol):
    """A blocking fetch-like callable."""

    def __call__(self, target: Target, options: Optional[Any] = None) -> httpx.Response:
        ...


class RequestInit(BaseModel):
    """
    Options understood by the default HTTP transport.
    Unknown keys are ignored so callers can pass the same bag to other transports.
    """
    method: str = "GET"
    headers: Optional[Dict[str, str]] = None
    body: Optional[Union[str, bytes]] = None
    params: Optional[Dict[str, Any]] = None
    timeout: Optional[float] = None
    follow_redirects: bool = True
    # asyncio.Event for fetch(), threading.Event for fetch_sync()
    signal: Optional[Any] = None
