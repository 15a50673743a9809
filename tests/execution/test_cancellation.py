"""Tests for cancelling an in-progress call."""

import asyncio
import time

import pytest
from aioresponses import CallbackResult

from cloudcraft.domain.exceptions import ErrorKind, RequestCancelledError
from cloudcraft.domain.http import Request
from cloudcraft.domain.retry import RetryPolicy
from cloudcraft.events import REQUEST_FAILED
from cloudcraft.execution import RateLimiter, RequestExecutor

URL = "https://api.cloudcraft.co/user/me"

# Long enough that a test only finishes quickly if the wait was interrupted
SLOW = 10.0


@pytest.fixture
def slow_policy():
    return RetryPolicy(max_retries=5, min_retry_delay=SLOW, max_retry_delay=SLOW)


@pytest.fixture
def slow_executor(transport, slow_policy, real_emitter, mock_logger):
    return RequestExecutor(
        transport, slow_policy, emitter=real_emitter, logger=mock_logger
    )


def set_later(event: asyncio.Event, delay: float = 0.05) -> None:
    asyncio.get_running_loop().call_later(delay, event.set)


async def slow_response(url, **kwargs):
    await asyncio.sleep(SLOW)
    return CallbackResult(status=200, body=b"{}")


class TestCancelEvent:
    """Test aborting a call with the cancel event."""

    @pytest.mark.asyncio
    async def test_already_cancelled_sends_nothing(
        self, executor, mock_api, sent_requests, recorded_events, mock_logger
    ) -> None:
        mock_api.get(URL, status=200, body=b"{}")
        cancel = asyncio.Event()
        cancel.set()

        with pytest.raises(RequestCancelledError) as exc_info:
            await executor.execute(Request("GET", URL), cancel=cancel)

        assert exc_info.value.deadline_exceeded is False
        assert sent_requests() == []
        [failed] = recorded_events[REQUEST_FAILED]
        assert failed.kind == ErrorKind.CANCELLED.value
        assert failed.attempts == 0
        mock_logger.info.assert_called_once()
        mock_logger.error.assert_not_called()

    @pytest.mark.asyncio
    async def test_cancel_during_backoff_stops_retrying(
        self, slow_executor, mock_api, sent_requests
    ) -> None:
        mock_api.get(URL, status=503, repeat=True)
        cancel = asyncio.Event()
        set_later(cancel)

        started = time.monotonic()
        with pytest.raises(RequestCancelledError):
            await slow_executor.execute(Request("GET", URL), cancel=cancel)

        assert time.monotonic() - started < SLOW / 2
        assert len(sent_requests()) == 1

    @pytest.mark.asyncio
    async def test_cancel_during_send(
        self, executor, mock_api, sent_requests
    ) -> None:
        mock_api.get(URL, callback=slow_response)
        cancel = asyncio.Event()
        set_later(cancel)

        started = time.monotonic()
        with pytest.raises(RequestCancelledError, match="during send"):
            await executor.execute(Request("GET", URL), cancel=cancel)

        assert time.monotonic() - started < SLOW / 2
        assert len(sent_requests()) == 1

    @pytest.mark.asyncio
    async def test_cancel_while_rate_limited(
        self, transport, fast_policy, mock_logger, mock_api, sent_requests
    ) -> None:
        limiter = RateLimiter(1, time_window=SLOW, logger=mock_logger)
        await limiter.acquire()
        executor = RequestExecutor(
            transport, fast_policy, rate_limiter=limiter, logger=mock_logger
        )
        mock_api.get(URL, status=200, body=b"{}")
        cancel = asyncio.Event()
        set_later(cancel)

        with pytest.raises(RequestCancelledError, match="rate limit"):
            await executor.execute(Request("GET", URL), cancel=cancel)

        assert sent_requests() == []

    @pytest.mark.asyncio
    async def test_unset_event_does_not_interfere(self, executor, mock_api) -> None:
        mock_api.get(URL, status=503)
        mock_api.get(URL, status=200, body=b"{}")

        response = await executor.execute(
            Request("GET", URL), cancel=asyncio.Event()
        )

        assert response.status == 200


class TestDeadline:
    """Test the timeout bounding a whole call."""

    @pytest.mark.asyncio
    async def test_deadline_during_backoff(
        self, slow_executor, mock_api, recorded_events
    ) -> None:
        mock_api.get(URL, status=503, repeat=True)

        started = time.monotonic()
        with pytest.raises(RequestCancelledError) as exc_info:
            await slow_executor.execute(Request("GET", URL), timeout=0.1)

        assert exc_info.value.deadline_exceeded is True
        assert time.monotonic() - started < SLOW / 2
        [failed] = recorded_events[REQUEST_FAILED]
        assert failed.kind == ErrorKind.CANCELLED.value

    @pytest.mark.asyncio
    async def test_deadline_during_send(self, executor, mock_api) -> None:
        mock_api.get(URL, callback=slow_response)

        with pytest.raises(RequestCancelledError) as exc_info:
            await executor.execute(Request("GET", URL), timeout=0.1)

        assert exc_info.value.deadline_exceeded is True

    @pytest.mark.asyncio
    async def test_generous_deadline_is_not_hit(self, executor, mock_api) -> None:
        mock_api.get(URL, status=200, body=b"{}")

        response = await executor.execute(Request("GET", URL), timeout=SLOW)

        assert response.status == 200


class TestTaskCancellation:
    @pytest.mark.asyncio
    async def test_task_cancellation_propagates(
        self, slow_executor, mock_api, recorded_events
    ) -> None:
        """Cancelling the calling task raises CancelledError, not a client error."""
        mock_api.get(URL, status=503, repeat=True)
        task = asyncio.create_task(slow_executor.execute(Request("GET", URL)))
        await asyncio.sleep(0.05)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert recorded_events[REQUEST_FAILED] == []

    @pytest.mark.asyncio
    async def test_task_cancellation_with_cancel_event(
        self, executor, mock_api
    ) -> None:
        mock_api.get(URL, callback=slow_response)
        task = asyncio.create_task(
            executor.execute(Request("GET", URL), cancel=asyncio.Event())
        )
        await asyncio.sleep(0.05)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
