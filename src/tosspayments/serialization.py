"""
JSON codec used by the requester.

Any object implementing the ``Serializer`` protocol can be passed to a
requester; ``DefaultSerializer`` is backed by pydantic.
"""
from functools import lru_cache
from typing import Any, Protocol

import pydantic_core
from pydantic import TypeAdapter, ValidationError

from .exceptions import DeserializationError, SerializationError


class Serializer(Protocol):
    """Serializer protocol for custom JSON handling."""

    def serialize(self, data: Any) -> str:
        """Serialize data to a JSON string, raising SerializationError."""
        ...

    def deserialize(self, text: str, response_type: Any = Any) -> Any:
        """Deserialize a JSON string into response_type, raising DeserializationError."""
        ...


@lru_cache(maxsize=128)
def _type_adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class DefaultSerializer:
    """Default JSON serializer.

    Encodes dicts, lists, dataclasses and pydantic models; decodes into any
    type pydantic can validate (``Any`` keeps the plain JSON value).
    """

    def serialize(self, data: Any) -> str:
        """Serialize data to JSON string."""
        try:
            return pydantic_core.to_json(data).decode("utf-8")
        except pydantic_core.PydanticSerializationError as e:
            raise SerializationError(f"Failed to serialize request body: {e}") from e

    def deserialize(self, text: str, response_type: Any = Any) -> Any:
        """Deserialize JSON string to response_type."""
        try:
            return _type_adapter(response_type).validate_json(text)
        except ValidationError as e:
            raise DeserializationError(
                f"Failed to parse response body as {getattr(response_type, '__name__', response_type)}"
            ) from e


default_serializer = DefaultSerializer()
