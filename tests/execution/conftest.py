"""Shared fixtures for executor tests."""

import pytest

from cloudcraft.events import REQUEST_COMPLETED, REQUEST_FAILED, REQUEST_RETRYING
from cloudcraft.execution import RequestExecutor


@pytest.fixture
def recorded_events(real_emitter):
    """Subscribe to every request event, collecting them per event type."""
    events: dict[str, list] = {
        REQUEST_RETRYING: [],
        REQUEST_COMPLETED: [],
        REQUEST_FAILED: [],
    }
    for event_type, collected in events.items():
        real_emitter.on(event_type, collected.append)
    return events


@pytest.fixture
def executor(transport, fast_policy, real_emitter, mock_logger):
    """Provide an executor with fast retries and a real emitter."""
    return RequestExecutor(
        transport, fast_policy, emitter=real_emitter, logger=mock_logger
    )
