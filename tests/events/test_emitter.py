"""Tests for EventEmitter dispatch."""

import pytest

from cloudcraft.events import REQUEST_COMPLETED, REQUEST_FAILED, EventEmitter


@pytest.fixture
def emitter(mock_logger):
    return EventEmitter(mock_logger)


class TestEventEmitterDispatch:
    """Test delivering events to handlers."""

    @pytest.mark.asyncio
    async def test_sync_and_async_handlers_receive_event(self, emitter) -> None:
        received = []

        def sync_handler(event) -> None:
            received.append(("sync", event))

        async def async_handler(event) -> None:
            received.append(("async", event))

        emitter.on(REQUEST_COMPLETED, sync_handler)
        emitter.on(REQUEST_COMPLETED, async_handler)
        await emitter.emit(REQUEST_COMPLETED, "payload")

        assert received == [("sync", "payload"), ("async", "payload")]

    @pytest.mark.asyncio
    async def test_only_matching_event_type_is_delivered(self, emitter) -> None:
        received = []
        emitter.on(REQUEST_FAILED, received.append)

        await emitter.emit(REQUEST_COMPLETED, "ignored")

        assert received == []

    @pytest.mark.asyncio
    async def test_emit_without_handlers_is_noop(self, emitter) -> None:
        await emitter.emit("unknown.event", object())

    @pytest.mark.asyncio
    async def test_failing_handler_is_logged_and_skipped(
        self, emitter, mock_logger
    ) -> None:
        """A raising handler must not stop later handlers."""
        received = []

        def broken(event) -> None:
            raise ValueError("observer bug")

        emitter.on(REQUEST_COMPLETED, broken)
        emitter.on(REQUEST_COMPLETED, received.append)
        await emitter.emit(REQUEST_COMPLETED, "payload")

        assert received == ["payload"]
        mock_logger.error.assert_called_once()
        assert "observer bug" in mock_logger.error.call_args[0][0]


class TestEventEmitterUnsubscribe:
    """Test removing handlers."""

    @pytest.mark.asyncio
    async def test_off_stops_delivery(self, emitter) -> None:
        received = []
        emitter.on(REQUEST_COMPLETED, received.append)
        emitter.off(REQUEST_COMPLETED, received.append)

        await emitter.emit(REQUEST_COMPLETED, "payload")

        assert received == []

    def test_off_unknown_handler_warns(self, emitter, mock_logger) -> None:
        emitter.off(REQUEST_COMPLETED, print)

        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_handler_can_unsubscribe_itself(self, emitter) -> None:
        calls = []

        def once(event) -> None:
            calls.append(event)
            emitter.off(REQUEST_COMPLETED, once)

        emitter.on(REQUEST_COMPLETED, once)
        await emitter.emit(REQUEST_COMPLETED, 1)
        await emitter.emit(REQUEST_COMPLETED, 2)

        assert calls == [1]
