"""Error hierarchy for jsonhttp.

Every error raised by the client derives from HTTPClientError, so callers can
catch one type. Each subclass names the stage that failed.
"""


class HTTPClientError(Exception):
    """Base class for all jsonhttp errors."""


class SerializationError(HTTPClientError):
    """Request body cannot be encoded as JSON."""


class RequestConstructionError(HTTPClientError):
    """Request cannot be built (malformed URL, unsupported scheme)."""


class InvalidProxyError(HTTPClientError):
    """Configured proxy URL cannot be parsed. Never retried."""


class TransportError(HTTPClientError):
    """Connection or timeout failure that outlived the retry budget."""

    def __init__(self, message: str, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts


class UnexpectedStatusError(HTTPClientError):
    """Final response status lies outside [200, 300)."""

    def __init__(self, method: str, url: str, status_code: int, body: bytes) -> None:
        super().__init__(f"{method} {url} returned unexpected status code {status_code}")
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body


class BodyReadError(HTTPClientError):
    """Response body could not be read after a response was obtained."""


class RequestError(HTTPClientError):
    """Decode layer: the underlying request failed."""


class DecodeError(HTTPClientError):
    """Decode layer: response bytes are not valid JSON for the target type."""
