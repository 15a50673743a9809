"""Event payloads emitted while executing requests."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseEvent(BaseModel):
    """Immutable base for every event."""

    model_config = ConfigDict(frozen=True)

    occurred_at: datetime = Field(
        default_factory=_utc_now, description="UTC time the event was created"
    )


class RequestEvent(BaseEvent):
    """Base for events about one logical request."""

    method: str = Field(description="HTTP method")
    url: str = Field(description="Request URL")


class RequestRetryingEvent(RequestEvent):
    """Emitted before waiting to send a request again."""

    attempt: int = Field(ge=1, description="Retry number about to happen (1-indexed)")
    max_retries: int = Field(ge=0, description="Configured retry limit")
    delay_seconds: float = Field(ge=0, description="Backoff before the retry")
    status: int | None = Field(
        default=None, description="Status that triggered the retry, if any"
    )
    error: str | None = Field(
        default=None, description="Transport error that triggered the retry, if any"
    )


class RequestCompletedEvent(RequestEvent):
    """Emitted when a request produced a successful response."""

    status: int = Field(description="Final HTTP status code")
    attempts: int = Field(ge=1, description="Network sends performed")
    elapsed_seconds: float = Field(ge=0, description="Wall time for all attempts")


class RequestFailedEvent(RequestEvent):
    """Emitted when a request ended with an error."""

    kind: str = Field(description="ErrorKind value of the raised error")
    message: str = Field(default="", description="Error message")
    attempts: int = Field(ge=0, description="Network sends performed")


REQUEST_RETRYING = "request.retrying"
REQUEST_COMPLETED = "request.completed"
REQUEST_FAILED = "request.failed"
