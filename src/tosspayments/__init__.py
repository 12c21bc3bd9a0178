"""
Toss Payments SDK for Python.

Provides an authenticated requester for the Toss Payments API with blocking
and future-based GET/POST calls, JSON (de)serialization and typed errors.
"""
from .authorization import TossPaymentsAuthentication
from .client import TossPayments
from .config import DEFAULT_CONNECT_TIMEOUT, RequesterConfig, validate_config
from .exceptions import (
    DeserializationError,
    InvalidCredentialError,
    RequestExecutionError,
    SerializationError,
    TossApiException,
    TossPaymentsError,
)
from .requester import (
    AbstractRequester,
    HttpxRequester,
    Requester,
    RequesterBuilder,
    build_default_headers,
)
from .serialization import DefaultSerializer, Serializer

__all__ = [
    # Client
    "TossPayments",
    "TossPaymentsAuthentication",
    # Config
    "RequesterConfig",
    "DEFAULT_CONNECT_TIMEOUT",
    "validate_config",
    # Requesters
    "Requester",
    "AbstractRequester",
    "HttpxRequester",
    "RequesterBuilder",
    "build_default_headers",
    # Serialization
    "Serializer",
    "DefaultSerializer",
    # Errors
    "TossPaymentsError",
    "InvalidCredentialError",
    "TossApiException",
    "RequestExecutionError",
    "SerializationError",
    "DeserializationError",
]

__version__ = "0.1.0"
