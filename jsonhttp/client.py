"""HTTP client with JSON helpers and fixed-delay retries.

The transport (proxy, TLS or a custom one) is resolved once when the client is
built, so a single HttpClient can be shared by concurrent tasks.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic_core import PydanticSerializationError, to_json

from jsonhttp import methods
from jsonhttp.errors import (
    BodyReadError,
    InvalidProxyError,
    RequestConstructionError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from jsonhttp.infrastructure.retry import SleepFn, is_success, send_with_retries
from jsonhttp.infrastructure.transport import build_transport
from jsonhttp.options import ClientConfig, Option, apply_options
from jsonhttp.settings import ClientSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

SUPPORTED_SCHEMES = ("http", "https")


class HttpClient:
    """JSON-over-HTTP client with retries, optional logging and pluggable transport.

    Non-2xx final responses raise UnexpectedStatusError unless the client was
    built with with_lenient_status(True), in which case the body is returned.

    Usage:
        async with jsonhttp.new(with_retries(3, 2.0)) as client:
            body = await client.get_request("https://api.example.com/data")
    """

    def __init__(self, config: ClientConfig | None = None, *, sleep: SleepFn = asyncio.sleep):
        self._config = config or ClientConfig()
        self._sleep = sleep
        self._proxy_error: InvalidProxyError | None = None

        transport: httpx.AsyncBaseTransport | None
        try:
            transport = build_transport(self._config)
        except InvalidProxyError as e:
            # Surfaces on every request, never at configuration time
            self._proxy_error = e
            transport = None

        self._client = httpx.AsyncClient(timeout=self._config.timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: ClientSettings, *options: Option) -> HttpClient:
        """Build a client from environment settings, with options applied on top."""
        return cls(apply_options(settings.to_config(), options))

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def post_request(
        self, url: str, body: Any, headers: Mapping[str, str] | None = None
    ) -> bytes:
        """Send body as JSON via POST and return the raw response body."""
        try:
            payload = to_json(body)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise SerializationError(f"failed to marshal request body: {e}") from e

        return await self._execute("POST", url, headers, content=payload)

    async def get_request(self, url: str, headers: Mapping[str, str] | None = None) -> bytes:
        """Send a GET request and return the raw response body."""
        return await self._execute("GET", url, headers)

    async def get_json(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        *,
        response_type: type[T] = Any,  # type: ignore[assignment]
    ) -> T:
        """GET url and decode the JSON response into response_type."""
        return await methods.get(self, url, headers, response_type=response_type)

    async def get_with_response_time(
        self, url: str, headers: Mapping[str, str] | None = None
    ) -> tuple[bytes, float]:
        """GET url and return the body with elapsed seconds, retries included."""
        start = time.perf_counter()
        body = await self.get_request(url, headers)
        return body, time.perf_counter() - start

    def _build_headers(
        self, headers: Mapping[str, str] | None, content: bytes | None
    ) -> httpx.Headers:
        merged = httpx.Headers()
        for key, value in self._config.default_headers:
            merged[key] = value
        if content is not None:
            merged["Content-Type"] = "application/json"
        for key, value in (headers or {}).items():
            merged[key] = value
        if self._config.user_agent:
            merged["User-Agent"] = self._config.user_agent
        return merged

    async def _execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None,
        content: bytes | None = None,
    ) -> bytes:
        if self._proxy_error is not None:
            raise InvalidProxyError(str(self._proxy_error)) from self._proxy_error

        try:
            request = self._client.build_request(
                method, url, headers=self._build_headers(headers, content), content=content
            )
        except httpx.InvalidURL as e:
            raise RequestConstructionError(f"failed to create {method} request: {e}") from e
        if request.url.scheme not in SUPPORTED_SCHEMES or not request.url.host:
            raise RequestConstructionError(
                f"failed to create {method} request: unsupported URL {url!r}"
            )

        config = self._config
        log_bodies = config.enable_logging and config.enable_body_logging
        if log_bodies and content is not None:
            logger.info(f"Request body: {content.decode('utf-8', errors='replace')}")

        try:
            response = await send_with_retries(
                lambda: self._client.send(request, stream=True),
                retries=config.retries,
                delay=config.retry_delay,
                label=f"{method} request to {url}",
                log_attempts=config.enable_logging,
                sleep=self._sleep,
            )
        except httpx.UnsupportedProtocol as e:
            raise RequestConstructionError(f"failed to create {method} request: {e}") from e
        except httpx.TransportError as e:
            raise TransportError(
                f"{method} request failed after {config.retries} retries: {e}",
                attempts=max(config.retries, 0) + 1,
            ) from e

        try:
            body = await response.aread()
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise BodyReadError(f"failed to read response body: {e}") from e
        finally:
            await response.aclose()

        if log_bodies:
            logger.info(f"Response body: {body.decode('utf-8', errors='replace')}")

        if not is_success(response) and not config.lenient_status:
            raise UnexpectedStatusError(method, url, response.status_code, body)

        return body


def new(*options: Option) -> HttpClient:
    """Create a client with a 30 second timeout and no retries, then apply options."""
    return HttpClient(apply_options(ClientConfig(), options))
