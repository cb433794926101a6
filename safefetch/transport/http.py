import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from .base import Transport
from ..exceptions import AbortError, NetworkError
from ..types import RequestInit, Target

logger = logging.getLogger("safefetch.transport")

SIGNAL_POLL_INTERVAL = 0.01


class HTTPTransport(Transport):
    """
    Fetch-style HTTP transport using httpx.

    Any HTTP status, including 4xx and 5xx, is a successful fetch and the
    response is returned as is. Only failures to obtain a response raise.
    """
    def __init__(
        self,
        base_url: str = "",
        headers: Dict[str, str] = None,
        timeout: float = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
        debug: bool = False,
    ):
        self.base_url = base_url
        self.headers = headers
        self.timeout = timeout
        self.transport = transport
        self.client = httpx.Client(
            base_url=base_url, headers=headers, timeout=timeout, transport=transport
        )

        if debug:
            logging.basicConfig(
                level=logging.DEBUG,
                format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            logging.getLogger("safefetch").setLevel(logging.DEBUG)

    def _async_client(self) -> httpx.AsyncClient:
        # AsyncClient pools are bound to one event loop.
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            transport=self.transport,
        )

    def _build_request(self, client, target: Target, init: RequestInit) -> httpx.Request:
        if isinstance(target, httpx.Request):
            return target

        kwargs: Dict[str, Any] = {}
        if init.headers is not None:
            kwargs["headers"] = init.headers
        if init.body is not None:
            kwargs["content"] = init.body
        if init.params is not None:
            kwargs["params"] = init.params
        if init.timeout is not None:
            kwargs["timeout"] = init.timeout
        return client.build_request(init.method, target, **kwargs)

    def _handle_error(self, e: httpx.RequestError, request: httpx.Request):
        """Map httpx transport errors to safefetch exceptions."""
        logger.debug(f"Network Error: {e}")
        raise NetworkError(
            f"Network error: {e}", url=str(request.url), method=request.method
        ) from e

    async def fetch(self, target: Target, options: Optional[Any] = None) -> httpx.Response:
        init = RequestInit.model_validate(options if options is not None else {})
        if init.signal is not None and init.signal.is_set():
            raise AbortError()

        async with self._async_client() as client:
            request = self._build_request(client, target, init)
            logger.debug(f"FETCH {request.method} {request.url}")
            try:
                response = await self._send_async(client, request, init)
            except httpx.RequestError as e:
                self._handle_error(e, request)
        logger.debug(f"FETCH {request.method} {request.url} -> {response.status_code}")
        return response

    async def _send_async(
        self, client: httpx.AsyncClient, request: httpx.Request, init: RequestInit
    ) -> httpx.Response:
        if init.signal is None:
            return await client.send(request, follow_redirects=init.follow_redirects)

        send_task = asyncio.ensure_future(
            client.send(request, follow_redirects=init.follow_redirects)
        )
        abort_task = asyncio.ensure_future(self._wait_for_signal(init.signal))
        try:
            done, _ = await asyncio.wait(
                {send_task, abort_task}, return_when=asyncio.FIRST_COMPLETED
            )
            if send_task in done:
                return send_task.result()
        finally:
            pending = [task for task in (send_task, abort_task) if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        logger.debug(f"ABORT {request.method} {request.url}")
        raise AbortError()

    async def _wait_for_signal(self, signal: Any) -> None:
        if isinstance(signal, asyncio.Event):
            await signal.wait()
            return
        # threading.Event and other blocking signals are polled
        while not signal.is_set():
            await asyncio.sleep(SIGNAL_POLL_INTERVAL)

    def fetch_sync(self, target: Target, options: Optional[Any] = None) -> httpx.Response:
        init = RequestInit.model_validate(options if options is not None else {})
        # A blocking request cannot be interrupted, so the signal is only
        # checked before sending.
        if init.signal is not None and init.signal.is_set():
            raise AbortError()

        request = self._build_request(self.client, target, init)
        logger.debug(f"FETCH {request.method} {request.url}")
        try:
            response = self.client.send(request, follow_redirects=init.follow_redirects)
        except httpx.RequestError as e:
            self._handle_error(e, request)
        logger.debug(f"FETCH {request.method} {request.url} -> {response.status_code}")
        return response

    def close(self):
        self.client.close()
