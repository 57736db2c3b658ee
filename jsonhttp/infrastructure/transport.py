"""Transport resolution: proxy and TLS settings turned into one httpx transport."""

import logging

import httpx

from jsonhttp.errors import InvalidProxyError
from jsonhttp.options import ClientConfig

logger = logging.getLogger(__name__)

PROXY_SCHEMES = ("http", "https")


def parse_proxy_url(proxy_url: str) -> httpx.URL:
    """Parse and check a proxy URL; raises InvalidProxyError."""
    try:
        url = httpx.URL(proxy_url)
    except httpx.InvalidURL as e:
        raise InvalidProxyError(f"invalid proxy URL {proxy_url!r}: {e}") from e

    if url.scheme not in PROXY_SCHEMES or not url.host:
        raise InvalidProxyError(
            f"invalid proxy URL {proxy_url!r}: expected http(s)://host[:port]"
        )
    return url


def build_transport(config: ClientConfig) -> httpx.AsyncBaseTransport:
    """Build the transport used for the whole client lifetime.

    A custom transport wins over proxy and TLS settings. Otherwise proxy and
    TLS settings are combined into a single AsyncHTTPTransport.

    Raises:
        InvalidProxyError: If the configured proxy URL cannot be parsed
    """
    if config.transport is not None:
        if config.proxy_url or config.verify is not True:
            logger.warning("Custom transport configured, ignoring proxy and TLS settings")
        return config.transport

    proxy = parse_proxy_url(config.proxy_url) if config.proxy_url else None
    if proxy is not None:
        logger.debug(f"Routing requests through proxy {proxy.scheme}://{proxy.host}")

    return httpx.AsyncHTTPTransport(
        proxy=httpx.Proxy(proxy) if proxy is not None else None,
        verify=config.verify,
    )
