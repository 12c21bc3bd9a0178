"""
Default request headers for the Toss API.
"""
import base64
import uuid
from typing import Callable, Dict, Optional, Union

from pydantic import SecretStr

TOKEN_PREFIX = "Basic "
JSON_CONTENT_TYPE = "application/json"
IDEMPOTENCY_KEY_HEADER = "Idempotency-Key"


def _default_key_generator() -> str:
    """Default key generator using UUID4."""
    return str(uuid.uuid4())


def _base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("utf-8")


def encode_basic_auth(secret_key: str) -> str:
    """Return the Authorization value for a secret key with an empty password."""
    return f"{TOKEN_PREFIX}{_base64_encode(f'{secret_key}:')}"


def build_default_headers(
    secret_key: Union[SecretStr, str],
    key_generator: Optional[Callable[[], str]] = None,
) -> Dict[str, str]:
    """
    Build the default header set for a request.

    A new Idempotency-Key is generated on every call.

    Args:
        secret_key: The secret key used for Basic authorization.
        key_generator: Optional idempotency key factory (defaults to uuid4).

    Returns:
        Content-Type, Accept, Authorization and Idempotency-Key headers.
    """
    if isinstance(secret_key, SecretStr):
        secret_key = secret_key.get_secret_value()
    generator = key_generator or _default_key_generator
    return {
        "Content-Type": JSON_CONTENT_TYPE,
        "Accept": JSON_CONTENT_TYPE,
        "Authorization": encode_basic_auth(secret_key),
        IDEMPOTENCY_KEY_HEADER: generator(),
    }


def mask_auth_header(value: str, visible_chars: int = 10) -> str:
    """Mask an auth header value, keeping the first visible_chars characters."""
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "*" * (len(value) - visible_chars)


def mask_headers_for_logging(headers: Dict[str, str]) -> Dict[str, str]:
    """Mask authorization header for safe logging."""
    masked = dict(headers)
    for key in masked:
        if key.lower() == "authorization":
            masked[key] = mask_auth_header(masked[key])
    return masked
