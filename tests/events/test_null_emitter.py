"""Tests for NullEmitter implementation."""

from typing import Any

import pytest

from cloudcraft.events import BaseEmitter, NullEmitter


@pytest.fixture
def null_emitter():
    """Provide a NullEmitter instance for testing."""
    return NullEmitter()


class TestNullEmitter:
    """Test NullEmitter implementation."""

    def test_null_emitter_implements_base_emitter(self, null_emitter):
        assert isinstance(null_emitter, BaseEmitter)

    @pytest.mark.asyncio
    async def test_all_methods_do_nothing_without_error(self, null_emitter):
        """Test that all emitter methods can be called without errors."""
        received = []

        def handler(event: Any) -> None:
            received.append(event)

        null_emitter.on("request.completed", handler)
        await null_emitter.emit("request.completed", {"data": "test"})
        null_emitter.off("request.completed", handler)

        assert received == []
