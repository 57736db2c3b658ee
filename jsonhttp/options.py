"""Client configuration and the option functions that build it.

Options are plain functions returning a new ClientConfig, applied in order by
jsonhttp.new(). Nothing is validated here; a bad proxy URL or timeout only
surfaces when a request is attempted.

Example:
    client = jsonhttp.new(
        with_timeout(5),
        with_retries(3, 2.0),
        with_logging(True),
        with_user_agent("MyCustomUserAgent/1.0"),
    )
"""

from __future__ import annotations

import ssl
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace

import httpx

DEFAULT_TIMEOUT = 30.0

# TLS settings as accepted by httpx: verification flag, CA bundle path or SSL context
VerifyTypes = ssl.SSLContext | str | bool


@dataclass(frozen=True)
class ClientConfig:
    """Resolved client settings; frozen once the client is built."""

    timeout: float = DEFAULT_TIMEOUT
    retries: int = 0
    retry_delay: float = 0.0  # seconds between attempts
    enable_logging: bool = False
    enable_body_logging: bool = False
    user_agent: str | None = None
    proxy_url: str | None = None
    verify: VerifyTypes = True
    transport: httpx.AsyncBaseTransport | None = None
    lenient_status: bool = False
    default_headers: tuple[tuple[str, str], ...] = ()


Option = Callable[[ClientConfig], ClientConfig]


def apply_options(config: ClientConfig, options: Iterable[Option]) -> ClientConfig:
    """Apply options in order; later options win on the same field."""
    for option in options:
        config = option(config)
    return config


def with_timeout(timeout: float) -> Option:
    """Set the per-attempt timeout in seconds."""

    def option(config: ClientConfig) -> ClientConfig:
        return replace(config, timeout=timeout)

    return option


def with_retries(retries: int, delay: float) -> Option:
    """Retry failed requests `retries` times, waiting `delay` seconds in between."""

    def option(config: ClientConfig) -> ClientConfig:
        return replace(config, retries=retries, retry_delay=delay)

    return option


def with_logging(enable: bool) -> Option:
    """Enable or disable per-attempt request logging."""

    def option(config: ClientConfig) -> ClientConfig:
        return replace(config, enable_logging=enable)

    return option


def with_body_logging(enable: bool) -> Option:
    """Log request and response bodies too (only with logging enabled).

    Bodies may carry credentials; use with caution.
    """

    def option(config: ClientConfig) -> ClientConfig:
        return replace(config, enable_body_logging=enable)

    return option


def with_user_agent(user_agent: str) -> Option:
    """Set a User-Agent header for every request, overriding per-call headers."""

    def option(config: ClientConfig) -> ClientConfig:
        return replace(config, user_agent=user_agent)

    return option


def with_proxy(proxy_url: str) -> Option:
    """Route requests through an http(s) proxy."""

    def option(config: ClientConfig) -> ClientConfig:
        return replace(config, proxy_url=proxy_url)

    return option


def with_tls_config(verify: VerifyTypes) -> Option:
    """Configure TLS: False disables verification, a path or SSLContext customizes it."""

    def option(config: ClientConfig) -> ClientConfig:
        return replace(config, verify=verify)

    return option


def with_transport(transport: httpx.AsyncBaseTransport) -> Option:
    """Use a custom transport. Takes precedence over proxy and TLS settings."""

    def option(config: ClientConfig) -> ClientConfig:
        return replace(config, transport=transport)

    return option


def with_custom_header(key: str, value: str) -> Option:
    """Add a header sent with every request; per-call headers override it."""

    def option(config: ClientConfig) -> ClientConfig:
        return replace(config, default_headers=(*config.default_headers, (key, value)))

    return option


def with_lenient_status(enable: bool) -> Option:
    """Return the body of a final non-2xx response instead of raising."""

    def option(config: ClientConfig) -> ClientConfig:
        return replace(config, lenient_status=enable)

    return option
