"""
Requester implementation backed by httpx.

Requests run on a private asyncio event loop thread owned by the requester,
so callers receive ``concurrent.futures.Future`` objects that can be waited
on from any thread or awaited from asyncio code via ``asyncio.wrap_future``.
"""
import asyncio
import logging
import threading
import weakref
from concurrent.futures import Future
from typing import Any, Callable, Coroutine, Dict, Optional, TypeVar

import httpx

from ..authorization import TossPaymentsAuthentication
from ..config import RequesterConfig, validate_config
from ..exceptions import (
    DeserializationError,
    RequestExecutionError,
    SerializationError,
    TossApiException,
)
from ..serialization import Serializer, default_serializer
from .base import AbstractRequester
from .headers import mask_headers_for_logging

T = TypeVar("T")

logger = logging.getLogger("tosspayments.requester.httpx_requester")

SUCCESS_STATUS_MIN = 100
SUCCESS_STATUS_MAX = 300
INFORMATIONAL_STATUS_MAX = 200

# Failures raised while building or sending a request.
TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL, OSError)


def is_success_status(status_code: int) -> bool:
    """Return True when a final response status counts as success.

    The success band is [100, 300), but 1xx codes are interim responses: one
    delivered as the final response is treated like any other failure.
    """
    if not SUCCESS_STATUS_MIN <= status_code < SUCCESS_STATUS_MAX:
        return False
    return status_code >= INFORMATIONAL_STATUS_MAX


class _EventLoopThread:
    """Runs an asyncio event loop on a daemon thread."""

    def __init__(self, name: str) -> None:
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        asyncio.set_event_loop(self._loop)
        try:
            self._loop.run_forever()
        finally:
            self._loop.close()

    def in_loop_thread(self) -> bool:
        return threading.current_thread() is self._thread

    def submit(self, coro: Coroutine[Any, Any, T]) -> "Future[T]":
        return asyncio.run_coroutine_threadsafe(coro, self._loop)

    async def cancel_pending(self) -> None:
        """Cancel every task on the loop except the caller's own."""
        current = asyncio.current_task()
        pending = [task for task in asyncio.all_tasks() if task is not current]
        for task in pending:
            task.cancel()
        if pending:
            logger.debug(f"_EventLoopThread.cancel_pending: cancelled {len(pending)} in-flight request(s)")
        await asyncio.gather(*pending, return_exceptions=True)

    def stop(self) -> None:
        """Stop the loop; joins the thread unless called from the loop itself."""
        if self._loop.is_closed():
            return
        self._loop.call_soon_threadsafe(self._loop.stop)
        if not self.in_loop_thread():
            self._thread.join()


class HttpxRequester(AbstractRequester):
    """Implementation of ``Requester`` using ``httpx.AsyncClient``."""

    def __init__(
        self,
        endpoint: str,
        authorization: TossPaymentsAuthentication,
        connect_timeout: float = AbstractRequester.DEFAULT_CONNECT_TIMEOUT,
        *,
        idempotency_key_per_request: bool = True,
        serializer: Optional[Serializer] = None,
        httpx_client: Optional[httpx.AsyncClient] = None,
        key_generator: Optional[Callable[[], str]] = None,
    ) -> None:
        """
        Args:
            endpoint: Base URL for the API endpoint; request paths are appended verbatim.
            authorization: Authentication object.
            connect_timeout: Connection timeout in seconds.
            idempotency_key_per_request: Generate a new Idempotency-Key for every
                request instead of reusing the one built at construction.
            serializer: JSON codec, defaults to the pydantic-backed serializer.
            httpx_client: Pre-configured client (tests pass one with a MockTransport).
            key_generator: Idempotency key factory, defaults to uuid4.
        """
        self._config = RequesterConfig(
            endpoint=endpoint,
            connect_timeout=connect_timeout,
            idempotency_key_per_request=idempotency_key_per_request,
        )
        validate_config(self._config)

        self._secret_key = authorization.secret_key
        self._key_generator = key_generator
        self._default_headers = self.get_default_headers(self._secret_key, key_generator)
        self._serializer = serializer or default_serializer

        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(None, connect=self._config.connect_timeout),
            )

        self._runner = _EventLoopThread(name=f"tosspayments-requester-{id(self):x}")
        # Stops the loop thread when the requester is garbage collected unclosed.
        self._finalizer = weakref.finalize(self, self._runner.stop)
        self._lock = threading.Lock()
        self._closed = False

    @classmethod
    def from_config(
        cls,
        config: RequesterConfig,
        authorization: TossPaymentsAuthentication,
        **kwargs: Any,
    ) -> "HttpxRequester":
        """Create a requester from a RequesterConfig."""
        return cls(
            config.endpoint,
            authorization,
            config.connect_timeout,
            idempotency_key_per_request=config.idempotency_key_per_request,
            **kwargs,
        )

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    def get_async(self, path: str, response_type: Any = Any) -> "Future[Any]":
        """Send a GET request to the specified path asynchronously."""
        return self._dispatch("GET", path, None, response_type)

    def post_async(self, path: str, body: Any, response_type: Any = Any) -> "Future[Any]":
        """Send a POST request with the given body asynchronously.

        The body is serialized before dispatch; a body the serializer rejects
        raises RequestExecutionError without touching the network.
        """
        try:
            content = self._serializer.serialize(body)
        except SerializationError as e:
            raise RequestExecutionError("Failed to serialize request body", e) from e
        return self._dispatch("POST", path, content, response_type)

    def _dispatch(
        self,
        method: str,
        path: str,
        content: Optional[str],
        response_type: Any,
    ) -> "Future[Any]":
        url = self._config.endpoint + path
        headers = self._request_headers()
        logger.debug(f"HttpxRequester._dispatch: {method} {url} headers={mask_headers_for_logging(headers)}")

        with self._lock:
            if self._closed:
                raise RuntimeError("Requester has been closed")
            return self._runner.submit(self._send(method, url, headers, content, response_type))

    def _request_headers(self) -> Dict[str, str]:
        if self._config.idempotency_key_per_request:
            return self.get_default_headers(self._secret_key, self._key_generator)
        return dict(self._default_headers)

    async def _send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        content: Optional[str],
        response_type: Any,
    ) -> Any:
        try:
            response = await self._client.request(
                method=method,
                url=url,
                headers=headers,
                content=content,
            )
        except TRANSPORT_ERRORS as e:
            logger.debug(f"HttpxRequester._send: {method} {url} failed: {e!r}")
            raise RequestExecutionError(f"HTTP request failed: {method} {url}", e) from e

        logger.debug(f"HttpxRequester._send: {method} {url} -> {response.status_code}")
        return self._parse_response(response, response_type)

    def _parse_response(self, response: httpx.Response, response_type: Any) -> Any:
        """Classify the response by status and decode the body into response_type."""
        if not is_success_status(response.status_code):
            raise TossApiException(response.status_code, response.text)

        try:
            return self._serializer.deserialize(response.text, response_type)
        except DeserializationError as e:
            raise RequestExecutionError("Failed to parse response body", e) from e

    def close(self) -> None:
        """Close the httpx client and stop the event loop thread.

        Called from the loop thread (e.g. a future's done-callback), the
        shutdown is scheduled and close returns without waiting for it.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True

        shutdown = self._runner.submit(self._shutdown())
        if self._runner.in_loop_thread():
            shutdown.add_done_callback(lambda _: self._finalizer())
            return
        shutdown.result()
        self._finalizer()

    async def _shutdown(self) -> None:
        await self._runner.cancel_pending()
        await self._client.aclose()

    def __enter__(self) -> "HttpxRequester":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
