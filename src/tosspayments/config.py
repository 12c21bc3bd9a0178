"""
Configuration for tosspayments requesters.
"""
from dataclasses import dataclass
from urllib.parse import urlparse

# Default connection timeout in seconds.
DEFAULT_CONNECT_TIMEOUT = 10.0


@dataclass(frozen=True)
class RequesterConfig:
    """Requester configuration.

    Only a connect timeout is modelled; reads and writes wait indefinitely.

    ``idempotency_key_per_request`` controls the ``Idempotency-Key`` header:
    when True every request carries a fresh key, when False the key generated
    at construction is reused for the requester's whole lifetime.
    """

    endpoint: str
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    idempotency_key_per_request: bool = True


def validate_config(config: RequesterConfig) -> None:
    """Validate requester configuration."""
    if not config.endpoint:
        raise ValueError("endpoint is required")

    parsed = urlparse(config.endpoint)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"Invalid endpoint: {config.endpoint}")

    if config.connect_timeout is None or config.connect_timeout <= 0:
        raise ValueError(f"connect_timeout must be positive, got {config.connect_timeout}")
