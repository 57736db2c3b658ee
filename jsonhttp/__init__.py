"""jsonhttp: JSON over HTTP with fixed-delay retries.

Public surface:
- new() / HttpClient: configured client exposing post_request() and get_request()
- post() / get(): decode layer over any RequestSender
- with_*() options and ClientSettings for configuration
- the HTTPClientError hierarchy
"""

from jsonhttp.client import HttpClient, new
from jsonhttp.errors import (
    BodyReadError,
    DecodeError,
    HTTPClientError,
    InvalidProxyError,
    RequestConstructionError,
    RequestError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from jsonhttp.methods import get, post
from jsonhttp.options import (
    ClientConfig,
    Option,
    with_body_logging,
    with_custom_header,
    with_lenient_status,
    with_logging,
    with_proxy,
    with_retries,
    with_timeout,
    with_tls_config,
    with_transport,
    with_user_agent,
)
from jsonhttp.protocol import RequestSender
from jsonhttp.settings import ClientSettings

__all__ = [
    "BodyReadError",
    "ClientConfig",
    "ClientSettings",
    "DecodeError",
    "HTTPClientError",
    "HttpClient",
    "InvalidProxyError",
    "Option",
    "RequestConstructionError",
    "RequestError",
    "RequestSender",
    "SerializationError",
    "TransportError",
    "UnexpectedStatusError",
    "get",
    "new",
    "post",
    "with_body_logging",
    "with_custom_header",
    "with_lenient_status",
    "with_logging",
    "with_proxy",
    "with_retries",
    "with_timeout",
    "with_tls_config",
    "with_transport",
    "with_user_agent",
]
