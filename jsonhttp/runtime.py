"""Runtime configuration building for the jsonhttp command line."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass
from typing import Any

from jsonhttp.options import (
    ClientConfig,
    Option,
    apply_options,
    with_body_logging,
    with_lenient_status,
    with_logging,
    with_proxy,
    with_retries,
    with_timeout,
    with_tls_config,
    with_user_agent,
)
from jsonhttp.settings import ClientSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeConfig:
    """Resolved command configuration after CLI/ENV merge."""

    method: str
    url: str
    headers: dict[str, str]
    body: Any
    client_config: ClientConfig
    timing: bool
    verbose: bool


def build_runtime_config(args: argparse.Namespace, settings: ClientSettings) -> RuntimeConfig:
    """Resolve final runtime configuration used by main().

    CLI arguments override environment settings field by field.
    """
    options: list[Option] = []
    if args.timeout is not None:
        options.append(with_timeout(args.timeout))
    if args.retries is not None or args.retry_delay is not None:
        retries = args.retries if args.retries is not None else settings.retries
        delay = args.retry_delay if args.retry_delay is not None else settings.retry_delay
        options.append(with_retries(retries, delay))
    if args.log or args.log_bodies:
        options.append(with_logging(True))
    if args.log_bodies:
        options.append(with_body_logging(True))
    if args.user_agent is not None:
        options.append(with_user_agent(args.user_agent))
    if args.proxy is not None:
        options.append(with_proxy(args.proxy))
    if args.insecure:
        options.append(with_tls_config(False))
    if args.lenient_status:
        options.append(with_lenient_status(True))

    if args.retries is not None and args.retries < 0:
        raise ValueError("--retries must be >= 0")

    method = args.method.upper()
    body = _parse_body(args.data) if method == "POST" else None
    if method == "GET" and args.data is not None:
        logger.warning("Ignoring --data for GET request")

    return RuntimeConfig(
        method=method,
        url=args.url,
        headers=_parse_headers(args.header),
        body=body,
        client_config=apply_options(settings.to_config(), options),
        timing=args.timing,
        verbose=args.verbose,
    )


def _parse_headers(values: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for value in values:
        key, sep, header_value = value.partition(":")
        if not sep or not key.strip():
            raise ValueError(f"Invalid header {value!r}, expected KEY:VALUE")
        headers[key.strip()] = header_value.strip()
    return headers


def _parse_body(data: str | None) -> Any:
    if data is None:
        return {}
    try:
        return json.loads(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"--data is not valid JSON: {e}") from e
