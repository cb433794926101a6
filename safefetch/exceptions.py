from typing import Optional


class SafeFetchError(Exception):
    """Base exception for all safefetch errors."""
    pass

class NetworkError(SafeFetchError):
    """Raised when the network connection fails."""
    def __init__(self, message: str, url: Optional[str] = None, method: Optional[str] = None):
        super().__init__(message)
        self.url = url
        self.method = method

class AbortError(SafeFetchError):
    """Raised when a request is cancelled through its signal."""
    def __init__(self, message: str = "The operation was aborted"):
        super().__init__(message)

class FetchFailedError(SafeFetchError):
    """Raised by ErrorResponse.raise_for_status(); ``response`` is the synthesized response."""
    def __init__(self, message: str, response=None):
        super().__init__(message)
        self.response = response
