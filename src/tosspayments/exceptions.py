"""
Exception types raised by the tosspayments requester.
"""
from typing import Optional


class TossPaymentsError(Exception):
    """Base class for every error raised by this package."""

    code = "TOSS_PAYMENTS_ERROR"


class InvalidCredentialError(TossPaymentsError, ValueError):
    """Raised when a secret key is missing or empty."""

    code = "INVALID_CREDENTIAL"


class TossApiException(TossPaymentsError):
    """
    Raised when the Toss API answers outside the success band.

    Carries the HTTP status code (and the raw response body, when one was
    received) so callers can branch on it.
    """

    code = "TOSS_API_ERROR"

    def __init__(self, status_code: int, response_body: Optional[str] = None) -> None:
        super().__init__(f"Toss Api http request failed {status_code}")
        self.status_code = status_code
        self.response_body = response_body

    def __repr__(self) -> str:
        return f"TossApiException(status_code={self.status_code!r})"


class RequestExecutionError(TossPaymentsError):
    """Transport, codec or interruption failure while executing a request."""

    code = "REQUEST_EXECUTION_ERROR"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class SerializationError(TossPaymentsError):
    """Request body could not be encoded as JSON."""

    code = "SERIALIZATION_ERROR"


class DeserializationError(TossPaymentsError):
    """Response body could not be decoded into the requested type."""

    code = "DESERIALIZATION_ERROR"
