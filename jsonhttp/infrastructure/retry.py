"""Fixed-delay retry loop around a single HTTP attempt."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    retry_if_result,
    stop_after_attempt,
    wait_fixed,
)

logger = logging.getLogger(__name__)

SendFn = Callable[[], Awaitable[httpx.Response]]
SleepFn = Callable[[float], Awaitable[None]]


def is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


def _is_retryable_error(exc: BaseException) -> bool:
    # An unsupported scheme fails identically on every attempt
    return isinstance(exc, httpx.TransportError) and not isinstance(
        exc, httpx.UnsupportedProtocol
    )


def _is_unsuccessful(response: httpx.Response) -> bool:
    return not is_success(response)


def _last_outcome(retry_state: RetryCallState) -> httpx.Response:
    """Return the last response, or re-raise the last transport error."""
    assert retry_state.outcome is not None
    return retry_state.outcome.result()


async def send_with_retries(
    send: SendFn,
    *,
    retries: int,
    delay: float,
    label: str,
    log_attempts: bool = False,
    sleep: SleepFn = asyncio.sleep,
) -> httpx.Response:
    """Run send() up to retries + 1 times, waiting delay seconds between failures.

    Transport errors and non-2xx responses are retried. A 2xx response ends the
    loop at once. When attempts run out the last response is returned as is,
    or the last transport error is re-raised. What a non-2xx final status means
    is up to the caller.

    Args:
        send: Performs one attempt and returns a response with an open stream
        retries: Re-attempts after the first failure (0 means a single attempt)
        delay: Fixed wait between attempts in seconds
        label: Request description for log lines, e.g. "GET request to https://..."
        log_attempts: Emit one INFO line per attempt and per failed attempt
        sleep: Wait function; asyncio.sleep keeps the delay cancellable

    Returns:
        Final httpx.Response; its stream is still open
    """
    attempt_number = 0
    previous: httpx.Response | None = None

    async def attempt() -> httpx.Response:
        nonlocal attempt_number, previous
        if previous is not None:
            await previous.aclose()
            previous = None

        attempt_number += 1
        if log_attempts:
            logger.info(f"Attempt {attempt_number}: Sending {label}")

        try:
            response = await send()
        except httpx.TransportError as e:
            if log_attempts:
                logger.info(f"Attempt {attempt_number} failed: {e}")
            raise

        if not is_success(response):
            previous = response
            if log_attempts:
                logger.info(
                    f"Attempt {attempt_number} failed with status code: {response.status_code}"
                )
        return response

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max(retries, 0) + 1),
        wait=wait_fixed(delay),
        retry=retry_if_exception(_is_retryable_error) | retry_if_result(_is_unsuccessful),
        retry_error_callback=_last_outcome,
        sleep=sleep,
    )
    try:
        return await retrying(attempt)
    except BaseException:
        # Cancelled during the wait: the pending non-2xx response is never returned
        if previous is not None:
            await previous.aclose()
        raise
