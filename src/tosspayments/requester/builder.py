"""
Builder for creating a Requester instance.
"""
import logging
from typing import Optional

from ..authorization import TossPaymentsAuthentication
from ..config import DEFAULT_CONNECT_TIMEOUT, RequesterConfig
from .base import Requester
from .httpx_requester import HttpxRequester

logger = logging.getLogger("tosspayments.requester.builder")


class RequesterBuilder:
    """
    Builder for creating a ``Requester``.

    Uses a caller-supplied requester when one is set, otherwise the default
    httpx requester.

    Example:
        requester = (
            RequesterBuilder("https://api.tosspayments.com/v1/inform", "test_sk_...")
            .with_connect_timeout(5)
            .build()
        )
    """

    def __init__(self, endpoint: str, secret_key: Optional[str]) -> None:
        self._endpoint = endpoint
        self._authorization = TossPaymentsAuthentication(secret_key)
        self._connect_timeout = DEFAULT_CONNECT_TIMEOUT
        self._idempotency_key_per_request = True
        self._requester: Optional[Requester] = None

    def with_requester(self, requester: Optional[Requester]) -> "RequesterBuilder":
        """Use a custom requester instead of the default one."""
        self._requester = requester
        return self

    def with_connect_timeout(self, connect_timeout: float) -> "RequesterBuilder":
        self._connect_timeout = connect_timeout
        return self

    def with_idempotency_key_per_request(self, enabled: bool) -> "RequesterBuilder":
        self._idempotency_key_per_request = enabled
        return self

    def build(self) -> Requester:
        """Build the Requester, creating the default one if none was set."""
        if self._requester is None:
            self._requester = self._default_requester()
        return self._requester

    def _default_requester(self) -> Requester:
        logger.debug(f"RequesterBuilder: building default requester for {self._endpoint}")
        config = RequesterConfig(
            endpoint=self._endpoint,
            connect_timeout=self._connect_timeout,
            idempotency_key_per_request=self._idempotency_key_per_request,
        )
        return HttpxRequester.from_config(config, self._authorization)
