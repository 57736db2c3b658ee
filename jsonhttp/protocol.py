"""Request sender protocol.

Senders implement the two executor methods without explicit inheritance, so
HttpClient and any test double are interchangeable in the decode layer.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RequestSender(Protocol):
    """Contract for objects the decode layer can send requests through."""

    async def post_request(
        self, url: str, body: Any, headers: Mapping[str, str] | None = None
    ) -> bytes:
        """Send body as JSON via POST and return the raw response body."""
        ...

    async def get_request(self, url: str, headers: Mapping[str, str] | None = None) -> bytes:
        """Send a GET request and return the raw response body."""
        ...
