"""Infrastructure layer used by the client.

- Fixed-delay retry loop built on tenacity
- Transport resolution for proxy and TLS settings
"""

from jsonhttp.infrastructure.retry import send_with_retries
from jsonhttp.infrastructure.transport import build_transport, parse_proxy_url

__all__ = ["build_transport", "parse_proxy_url", "send_with_retries"]
