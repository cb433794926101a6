from .types import ERROR_STATUS, Fetch, SyncFetch, RequestInit
from .wrapper import (
    create_safe_fetch, create_safe_fetch_sync, get_default_transport,
    fetch, fetch_sync, safe_fetch, safe_fetch_sync
)
from .normalize import normalize
from .response import ErrorResponse, is_error_response
from .transport import Transport, HTTPTransport
from .testing import MockTransport
from .exceptions import SafeFetchError, NetworkError, AbortError, FetchFailedError

__version__ = "0.1.0"

__all__ = [
    "ERROR_STATUS",
    "Fetch",
    "SyncFetch",
    "RequestInit",
    "create_safe_fetch",
    "create_safe_fetch_sync",
    "get_default_transport",
    "fetch",
    "fetch_sync",
    "safe_fetch",
    "safe_fetch_sync",
    "normalize",
    "ErrorResponse",
    "is_error_response",
    "Transport",
    "HTTPTransport",
    "MockTransport",
    "SafeFetchError",
    "NetworkError",
    "AbortError",
    "FetchFailedError",
]
