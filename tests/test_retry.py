"""Tests for the fixed-delay retry loop."""

import asyncio

import httpx
import pytest

from jsonhttp.infrastructure.retry import send_with_retries

URL = "https://api.example.com/data"


def _response(status_code: int, content: bytes = b"{}") -> httpx.Response:
    return httpx.Response(status_code, content=content, request=httpx.Request("GET", URL))


class ScriptedSend:
    """Callable returning scripted responses or raising scripted errors."""

    def __init__(self, *outcomes: httpx.Response | Exception) -> None:
        self.outcomes = list(outcomes)
        self.calls = 0

    async def __call__(self) -> httpx.Response:
        outcome = self.outcomes[min(self.calls, len(self.outcomes) - 1)]
        self.calls += 1
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class TestSendWithRetries:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("retries", [0, 1, 3, 5])
    async def test_permanent_failure_makes_retries_plus_one_attempts(
        self, retries, recording_sleep
    ):
        send = ScriptedSend(httpx.ConnectError("connection refused"))

        with pytest.raises(httpx.ConnectError):
            await send_with_retries(
                send, retries=retries, delay=0.5, label=f"GET request to {URL}", sleep=recording_sleep
            )

        assert send.calls == retries + 1
        assert recording_sleep.calls == [0.5] * retries

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failures", [0, 1, 2, 3])
    async def test_recovers_after_k_failures_with_k_sleeps(self, failures, recording_sleep):
        ok = _response(200, b'{"ok": true}')
        send = ScriptedSend(*([httpx.ReadTimeout("timed out")] * failures), ok)

        response = await send_with_retries(
            send, retries=3, delay=2.0, label="GET", sleep=recording_sleep
        )

        assert response is ok
        assert send.calls == failures + 1
        assert recording_sleep.calls == [2.0] * failures

    @pytest.mark.asyncio
    async def test_success_stops_immediately(self, recording_sleep):
        send = ScriptedSend(_response(204, b""), _response(500))

        response = await send_with_retries(
            send, retries=10, delay=1.0, label="GET", sleep=recording_sleep
        )

        assert response.status_code == 204
        assert send.calls == 1
        assert recording_sleep.calls == []

    @pytest.mark.asyncio
    async def test_non_2xx_is_retried_then_returned(self, recording_sleep):
        send = ScriptedSend(_response(503), _response(502), _response(500, b"last"))

        response = await send_with_retries(
            send, retries=2, delay=1.0, label="GET", sleep=recording_sleep
        )

        assert response.status_code == 500
        assert response.content == b"last"
        assert send.calls == 3
        assert len(recording_sleep.calls) == 2

    @pytest.mark.asyncio
    async def test_non_2xx_then_success(self, recording_sleep):
        send = ScriptedSend(_response(500), _response(200, b"fine"))

        response = await send_with_retries(
            send, retries=3, delay=1.0, label="GET", sleep=recording_sleep
        )

        assert response.status_code == 200
        assert send.calls == 2
        assert recording_sleep.calls == [1.0]

    @pytest.mark.asyncio
    async def test_unsupported_protocol_is_not_retried(self, recording_sleep):
        send = ScriptedSend(httpx.UnsupportedProtocol("ftp is not supported"))

        with pytest.raises(httpx.UnsupportedProtocol):
            await send_with_retries(send, retries=3, delay=1.0, label="GET", sleep=recording_sleep)

        assert send.calls == 1
        assert recording_sleep.calls == []

    @pytest.mark.asyncio
    async def test_cancellation_aborts_during_delay(self):
        send = ScriptedSend(httpx.ConnectError("down"))

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(
                send_with_retries(send, retries=5, delay=30.0, label="GET"),
                timeout=0.2,
            )

        assert send.calls == 1

    @pytest.mark.asyncio
    async def test_logs_each_attempt(self, recording_sleep, caplog):
        caplog.set_level("INFO", logger="jsonhttp")
        send = ScriptedSend(httpx.ConnectError("down"), _response(500), _response(200))

        await send_with_retries(
            send,
            retries=2,
            delay=0.0,
            label=f"GET request to {URL}",
            log_attempts=True,
            sleep=recording_sleep,
        )

        messages = [record.getMessage() for record in caplog.records]
        assert f"Attempt 1: Sending GET request to {URL}" in messages
        assert "Attempt 1 failed: down" in messages
        assert "Attempt 2 failed with status code: 500" in messages
        assert f"Attempt 3: Sending GET request to {URL}" in messages

    @pytest.mark.asyncio
    async def test_silent_without_logging(self, recording_sleep, caplog):
        caplog.set_level("INFO", logger="jsonhttp")
        send = ScriptedSend(_response(200))

        await send_with_retries(send, retries=0, delay=0.0, label="GET", sleep=recording_sleep)

        assert caplog.records == []
