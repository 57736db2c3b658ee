"""Generic decode layer: send through any RequestSender, validate JSON into a type."""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from jsonhttp.errors import DecodeError, RequestError
from jsonhttp.protocol import RequestSender

T = TypeVar("T")


async def post(
    client: RequestSender,
    url: str,
    body: Any,
    headers: Mapping[str, str] | None = None,
    *,
    response_type: type[T] = Any,  # type: ignore[assignment]
) -> T:
    """Send a POST request and decode the response into response_type.

    Raises:
        RequestError: If the client failed to complete the request
        DecodeError: If the response is not valid JSON for response_type
    """
    try:
        raw = await client.post_request(url, body, headers)
    except Exception as e:
        raise RequestError(f"http POST request failed: {e}") from e
    return decode(raw, response_type)


async def get(
    client: RequestSender,
    url: str,
    headers: Mapping[str, str] | None = None,
    *,
    response_type: type[T] = Any,  # type: ignore[assignment]
) -> T:
    """Send a GET request and decode the response into response_type.

    Raises:
        RequestError: If the client failed to complete the request
        DecodeError: If the response is not valid JSON for response_type
    """
    try:
        raw = await client.get_request(url, headers)
    except Exception as e:
        raise RequestError(f"http GET request failed: {e}") from e
    return decode(raw, response_type)


@lru_cache(maxsize=256)
def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def decode(raw: bytes, response_type: type[T]) -> T:
    """Validate raw JSON bytes into response_type (models, dataclasses, builtins)."""
    try:
        return _adapter_for(response_type).validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"failed to unmarshal response: {e}") from e
