"""
Credential holder for the Toss Payments API.
"""
from typing import Optional

from pydantic import SecretStr

from .exceptions import InvalidCredentialError


class TossPaymentsAuthentication:
    """Secret key used to authenticate against the Toss API.

    The key is validated on construction and kept as a ``SecretStr`` so it
    never shows up in ``repr`` output or logs.
    """

    __slots__ = ("_secret_key",)

    def __init__(self, secret_key: Optional[str]) -> None:
        if secret_key is None or secret_key == "":
            raise InvalidCredentialError("Secret key must not be null or empty")
        object.__setattr__(self, "_secret_key", SecretStr(secret_key))

    @property
    def secret_key(self) -> SecretStr:
        return self._secret_key

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TossPaymentsAuthentication):
            return NotImplemented
        return self._secret_key == other._secret_key

    def __hash__(self) -> int:
        return hash(self._secret_key)

    def __repr__(self) -> str:
        return f"TossPaymentsAuthentication(secret_key={self._secret_key!r})"
