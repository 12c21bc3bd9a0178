"""
Requester interface and its shared blocking implementation.
"""
import logging
from abc import ABC, abstractmethod
from concurrent.futures import CancelledError, Future
from typing import Any, Callable, Dict, Optional, TypeVar

from pydantic import SecretStr

from ..config import DEFAULT_CONNECT_TIMEOUT
from ..exceptions import RequestExecutionError
from .headers import build_default_headers

T = TypeVar("T")

logger = logging.getLogger("tosspayments.requester.base")


class Requester(ABC):
    """
    Interface for making HTTP requests to the Toss API.

    Provides blocking and non-blocking GET and POST requests. The non-blocking
    variants return a ``concurrent.futures.Future``; asyncio callers can await
    it with ``asyncio.wrap_future``.
    """

    @abstractmethod
    def get(self, path: str, response_type: Any = Any) -> Any:
        """Send a GET request and wait for the decoded response."""

    @abstractmethod
    def get_async(self, path: str, response_type: Any = Any) -> "Future[Any]":
        """Send a GET request and return a future of the decoded response."""

    @abstractmethod
    def post(self, path: str, body: Any, response_type: Any = Any) -> Any:
        """Send a POST request with a JSON body and wait for the decoded response."""

    @abstractmethod
    def post_async(self, path: str, body: Any, response_type: Any = Any) -> "Future[Any]":
        """Send a POST request with a JSON body and return a future of the decoded response."""


class AbstractRequester(Requester):
    """
    Base implementation for requesters that handle HTTP requests.

    Subclasses implement ``get_async`` and ``post_async``; the blocking
    methods wait on those futures so both forms share one code path and one
    error taxonomy.
    """

    DEFAULT_CONNECT_TIMEOUT = DEFAULT_CONNECT_TIMEOUT

    def get_default_headers(
        self,
        secret_key: SecretStr,
        key_generator: Optional[Callable[[], str]] = None,
    ) -> Dict[str, str]:
        """Default headers including Basic authorization and an idempotency key."""
        return build_default_headers(secret_key, key_generator)

    def get(self, path: str, response_type: Any = Any) -> Any:
        return self._wait(self.get_async(path, response_type))

    def post(self, path: str, body: Any, response_type: Any = Any) -> Any:
        return self._wait(self.post_async(path, body, response_type))

    @staticmethod
    def _wait(future: "Future[T]") -> T:
        """Block until the future settles, re-raising its own exception."""
        try:
            return future.result()
        except CancelledError as e:
            logger.debug("Blocking request was cancelled before completion")
            raise RequestExecutionError("Request was interrupted", e) from e
