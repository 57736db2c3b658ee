"""Logging setup helpers for the jsonhttp command line."""

from __future__ import annotations

import logging


def configure_logging(verbose: bool = False) -> None:
    """Configure base logging; verbose enables DEBUG for jsonhttp loggers."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    if verbose:
        logging.getLogger("jsonhttp").setLevel(logging.DEBUG)
