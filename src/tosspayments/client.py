"""
Root module for the Toss Payments SDK.
"""
from typing import Optional

from .requester.base import Requester
from .requester.builder import RequesterBuilder


class TossPayments:
    """Entry point owning one requester for the Toss Payments API."""

    # Base URL for all API requests.
    ENDPOINT = "https://api.tosspayments.com/v1/inform"

    def __init__(self, secret_key: Optional[str], requester: Optional[Requester] = None) -> None:
        """
        Args:
            secret_key: The secret key for authentication with Toss Payments.
            requester: Custom requester for handling requests.
        """
        self._requester = (
            RequesterBuilder(self.ENDPOINT, secret_key)
            .with_requester(requester)
            .build()
        )

    @property
    def requester(self) -> Requester:
        return self._requester

    def close(self) -> None:
        """Close the underlying requester if it holds resources."""
        close = getattr(self._requester, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "TossPayments":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
