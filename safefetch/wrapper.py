import atexit
import functools
import inspect
from typing import Any, Callable, Optional

import httpx

from .normalize import normalize
from .transport.http import HTTPTransport
from .types import Fetch, SyncFetch, Target


def create_safe_fetch(fetch: Callable[..., Any]) -> Fetch:
    """
    Wrap a fetch-like callable so that awaiting it never raises.

    The transport may be a coroutine function or a plain function. A response
    it produces is returned unchanged; an exception raised while calling it or
    while awaiting its result is turned into an ErrorResponse.
    """
    @functools.wraps(fetch)
    async def safe_fetch(target: Target, options: Optional[Any] = None) -> httpx.Response:
        try:
            result = fetch(target, options)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as error:
            return normalize(error)

    return safe_fetch


def create_safe_fetch_sync(fetch: Callable[..., httpx.Response]) -> SyncFetch:
    """Blocking counterpart of create_safe_fetch."""
    @functools.wraps(fetch)
    def safe_fetch_sync(target: Target, options: Optional[Any] = None) -> httpx.Response:
        try:
            return fetch(target, options)
        except Exception as error:
            return normalize(error)

    return safe_fetch_sync


_default_transport: Optional[HTTPTransport] = None


def get_default_transport() -> HTTPTransport:
    """The shared transport behind fetch() and fetch_sync(), created on first use."""
    global _default_transport
    if _default_transport is None:
        _default_transport = HTTPTransport()
        atexit.register(_default_transport.close)
    return _default_transport


async def fetch(target: Target, options: Optional[Any] = None) -> httpx.Response:
    return await get_default_transport().fetch(target, options)


def fetch_sync(target: Target, options: Optional[Any] = None) -> httpx.Response:
    return get_default_transport().fetch_sync(target, options)


safe_fetch = create_safe_fetch(fetch)
safe_fetch_sync = create_safe_fetch_sync(fetch_sync)
