"""CLI argument parsing for jsonhttp."""

from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI parser used by the main entrypoint."""
    parser = argparse.ArgumentParser(
        prog="jsonhttp",
        description="jsonhttp - send JSON requests with retries from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Simple GET
  jsonhttp get https://api.example.com/data

  # GET with retries, logging and a custom user agent
  jsonhttp get https://api.example.com/data --retries 3 --retry-delay 2 \\
      --log --user-agent MyCustomUserAgent/1.0

  # POST a JSON body with a header
  jsonhttp post https://api.example.com/items --data '{"name": "x"}' \\
      --header "Authorization: Bearer token"

Environment Variables:
  JSONHTTP_TIMEOUT        Per-attempt timeout in seconds (default: 30)
  JSONHTTP_RETRIES        Retries after the first attempt (default: 0)
  JSONHTTP_RETRY_DELAY    Seconds between attempts (default: 0)
  JSONHTTP_LOGGING        Log each attempt
  JSONHTTP_BODY_LOGGING   Log request and response bodies
  JSONHTTP_USER_AGENT     User-Agent header
  JSONHTTP_PROXY          Proxy URL
  JSONHTTP_VERIFY_TLS     Verify TLS certificates (default: true)
  JSONHTTP_CA_BUNDLE      CA bundle path used for verification
  JSONHTTP_LENIENT_STATUS Return non-2xx bodies instead of failing
        """,
    )

    parser.add_argument("method", choices=["get", "post"], help="HTTP method.")
    parser.add_argument("url", help="Target URL.")
    parser.add_argument(
        "--header",
        "-H",
        action="append",
        default=[],
        metavar="KEY:VALUE",
        help="Request header, may be repeated.",
    )
    parser.add_argument(
        "--data",
        "-d",
        type=str,
        default=None,
        help="JSON request body for POST (default: {}).",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Timeout in seconds.")
    parser.add_argument("--retries", type=int, default=None, help="Retry count.")
    parser.add_argument(
        "--retry-delay", type=float, default=None, help="Seconds to wait between attempts."
    )
    parser.add_argument(
        "--log", action="store_true", default=None, help="Log every attempt."
    )
    parser.add_argument(
        "--log-bodies",
        action="store_true",
        default=None,
        help="Log request and response bodies (implies --log).",
    )
    parser.add_argument("--user-agent", type=str, default=None, help="User-Agent header.")
    parser.add_argument("--proxy", type=str, default=None, help="Proxy URL.")
    parser.add_argument(
        "--insecure",
        action="store_true",
        default=False,
        help="Disable TLS certificate verification.",
    )
    parser.add_argument(
        "--lenient-status",
        action="store_true",
        default=None,
        help="Print the body of a non-2xx final response instead of failing.",
    )
    parser.add_argument(
        "--timing", action="store_true", default=False, help="Print elapsed request time."
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", default=False, help="Enable DEBUG logging."
    )

    return parser
