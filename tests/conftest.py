"""Shared fixtures for jsonhttp tests."""

from collections.abc import Callable

import httpx
import pytest


class RecordingSleep:
    """Sleep replacement that records requested delays without waiting."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class RecordingHandler:
    """MockTransport handler that records requests and replays scripted outcomes.

    Each outcome is an httpx.Response or an exception instance to raise. The last
    outcome repeats once the script runs out.
    """

    def __init__(self, *outcomes: httpx.Response | Exception) -> None:
        self.outcomes = list(outcomes)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.outcomes)) - 1
        outcome = self.outcomes[index]
        if isinstance(outcome, Exception):
            raise outcome
        return httpx.Response(
            outcome.status_code, headers=outcome.headers, content=outcome.content
        )


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_transport() -> Callable[..., tuple[httpx.MockTransport, RecordingHandler]]:
    def factory(
        *outcomes: httpx.Response | Exception,
    ) -> tuple[httpx.MockTransport, RecordingHandler]:
        handler = RecordingHandler(*outcomes)
        return httpx.MockTransport(handler), handler

    return factory
