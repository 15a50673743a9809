"""In-process event emitter with sync and async handler support."""

import inspect
import typing as t
from collections import defaultdict

from ..infrastructure.logging import get_logger
from .base import BaseEmitter, EventHandler

if t.TYPE_CHECKING:
    import loguru


class EventEmitter(BaseEmitter):
    """Dispatches events to handlers registered per event type.

    Handlers run sequentially in registration order. A handler that raises is
    logged and skipped so one faulty observer cannot break a request.
    """

    def __init__(self, logger: "loguru.Logger" = get_logger(__name__)) -> None:
        self._logger = logger
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def on(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def off(self, event_type: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            self._logger.warning(f"Handler {handler} not found for event {event_type}")
            return
        handlers.remove(handler)

    async def emit(self, event_type: str, event_data: t.Any) -> None:
        # Copy so handlers can unsubscribe themselves while being called
        for handler in list(self._handlers.get(event_type, [])):
            try:
                result = handler(event_data)
                if inspect.isawaitable(result):
                    await result
            except Exception as exc:
                self._logger.error(
                    f"Event handler {handler} failed for {event_type}: {exc}"
                )
