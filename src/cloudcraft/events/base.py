"""Abstract base class for request lifecycle event emitters."""

import typing as t
from abc import ABC, abstractmethod

# Handlers may be plain callables or coroutine functions
EventHandler = t.Callable[[t.Any], t.Awaitable[None] | None]


class BaseEmitter(ABC):
    """Publishes request lifecycle events (retrying, completed, failed).

    The executor only depends on this interface, so observers can be plugged
    in without touching the retry loop.
    """

    @abstractmethod
    def on(self, event_type: str, handler: EventHandler) -> None:
        """Register handler for events of event_type."""
        pass

    @abstractmethod
    def off(self, event_type: str, handler: EventHandler) -> None:
        """Remove a previously registered handler."""
        pass

    @abstractmethod
    async def emit(self, event_type: str, event_data: t.Any) -> None:
        """Deliver event_data to every handler registered for event_type."""
        pass
