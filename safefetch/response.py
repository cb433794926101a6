from typing import Any

import httpx

from .exceptions import FetchFailedError
from .types import ERROR_STATUS

# Status used at construction, replaced by ERROR_STATUS right after.
PLACEHOLDER_STATUS = 599


class ErrorResponse(httpx.Response):
    """
    A synthesized response standing in for a failed transport call.

    ``status_code`` is ``ERROR_STATUS`` and cannot be reassigned,
    ``reason_phrase`` carries the failure summary and the body is JSON.
    """

    def __init__(self, status_text: str, body: str):
        super().__init__(
            PLACEHOLDER_STATUS,
            headers={"Content-Type": "application/json"},
            content=body.encode("utf-8"),
        )
        self._status_text = status_text
        self.status_code = ERROR_STATUS
        self._sealed = True

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "status_code" and self.__dict__.get("_sealed", False):
            raise AttributeError("status_code of an ErrorResponse is read-only")
        super().__setattr__(name, value)

    @property
    def is_error(self) -> bool:
        return True

    def raise_for_status(self) -> "ErrorResponse":
        raise FetchFailedError(self._status_text, response=self)

    @property
    def reason_phrase(self) -> str:
        return self._status_text

    def __repr__(self) -> str:
        return f"<ErrorResponse [{self.status_code} {self._status_text!r}]>"


def is_error_response(response: httpx.Response) -> bool:
    """True if the response was synthesized from a failure."""
    return response.status_code == ERROR_STATUS
