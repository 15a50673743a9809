"""Event infrastructure - emitters and request lifecycle events."""

from .base import BaseEmitter, EventHandler
from .emitter import EventEmitter
from .models import (
    REQUEST_COMPLETED,
    REQUEST_FAILED,
    REQUEST_RETRYING,
    BaseEvent,
    RequestCompletedEvent,
    RequestEvent,
    RequestFailedEvent,
    RequestRetryingEvent,
)
from .null import NullEmitter

__all__ = [
    # Base and implementations
    "BaseEmitter",
    "EventEmitter",
    "EventHandler",
    "NullEmitter",
    # Event types
    "REQUEST_RETRYING",
    "REQUEST_COMPLETED",
    "REQUEST_FAILED",
    # Event models
    "BaseEvent",
    "RequestEvent",
    "RequestRetryingEvent",
    "RequestCompletedEvent",
    "RequestFailedEvent",
]
