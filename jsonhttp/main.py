"""Entry point for the jsonhttp command line."""

import asyncio
import logging
import sys
import time

from rich.console import Console

from jsonhttp.cli import build_parser
from jsonhttp.client import HttpClient
from jsonhttp.errors import HTTPClientError
from jsonhttp.logging_setup import configure_logging
from jsonhttp.runtime import RuntimeConfig, build_runtime_config
from jsonhttp.settings import ClientSettings

logger = logging.getLogger(__name__)

console = Console()


async def run_request(runtime: RuntimeConfig) -> tuple[bytes, float]:
    """Send the configured request and return the body with elapsed seconds."""
    async with HttpClient(runtime.client_config) as client:
        if runtime.method == "POST":
            start = time.perf_counter()
            body = await client.post_request(runtime.url, runtime.body, runtime.headers)
            return body, time.perf_counter() - start
        return await client.get_with_response_time(runtime.url, runtime.headers)


def render_body(body: bytes) -> None:
    text = body.decode("utf-8", errors="replace")
    try:
        console.print_json(text)
    except ValueError:
        console.print(text, markup=False, highlight=False)


def main() -> None:
    """Main entry point for jsonhttp."""
    args = build_parser().parse_args()
    configure_logging(verbose=args.verbose)

    try:
        settings = ClientSettings()
        runtime = build_runtime_config(args, settings)
    except ValueError as e:
        sys.exit(f"Configuration error: {e}")

    try:
        body, elapsed = asyncio.run(run_request(runtime))
    except KeyboardInterrupt:
        logger.info("Request cancelled by user")
        sys.exit(130)
    except HTTPClientError as e:
        logger.error(f"Request failed: {e}")
        sys.exit(1)

    render_body(body)
    if runtime.timing:
        console.print(f"[dim]Elapsed: {elapsed:.3f}s[/dim]")


if __name__ == "__main__":
    main()
