"""Custom exceptions for the Cloudcraft client.

Every exception carries a ``kind`` so callers can branch on the category of
failure without inspecting messages:

    try:
        await client.blueprint.get(blueprint_id)
    except CloudcraftError as exc:
        match exc.kind:
            case ErrorKind.REQUEST_FAILED:
                ...
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure categories raised by the client."""

    CONFIG = "config"  # Invalid configuration, raised at construction
    VALIDATION = "validation"  # Bad arguments, raised before any request
    CLIENT_STATE = "client_state"  # Client used before open() or after close()
    CANCELLED = "cancelled"  # Caller cancelled or deadline exceeded
    TRANSPORT = "transport"  # No response received
    RETRIES_EXHAUSTED = "retries_exhausted"  # Transport failed on every attempt
    REQUEST_FAILED = "request_failed"  # Non-success status code
    BODY_IO = "body_io"  # Failure reading, draining or closing a body
    DECODE = "decode"  # Response payload did not have the expected shape


class CloudcraftError(Exception):
    """Base exception for all Cloudcraft client errors."""

    kind: ErrorKind


# Configuration


class ConfigError(CloudcraftError):
    """Base exception for invalid client configuration."""

    kind = ErrorKind.CONFIG


class MissingEndpointSchemeError(ConfigError):
    """Raised when the configuration has no endpoint scheme."""

    def __init__(self) -> None:
        super().__init__("missing endpoint scheme")


class MissingEndpointHostError(ConfigError):
    """Raised when the configuration has no endpoint host."""

    def __init__(self) -> None:
        super().__init__("missing endpoint host")


class MissingKeyError(ConfigError):
    """Raised when the configuration has no API key."""

    def __init__(self) -> None:
        super().__init__("missing API key")


class InvalidKeyError(ConfigError):
    """Raised when the API key does not have the expected length."""

    def __init__(self, length: int, expected: int) -> None:
        self.length = length
        self.expected = expected
        super().__init__(f"invalid API key; length must be {expected}, got {length}")


class InvalidRetryPolicyError(ConfigError):
    """Raised when retry settings are out of range."""


class EndpointError(ConfigError):
    """Base exception for endpoint fragments that cannot form a base URL."""


class MissingFragmentError(EndpointError):
    """Raised when scheme or host is empty."""

    def __init__(self) -> None:
        super().__init__("missing scheme or host")


class InvalidSchemeError(EndpointError):
    """Raised when the scheme is neither http nor https."""

    def __init__(self, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(f"invalid URL scheme: {scheme!r}")


class InvalidEndpointError(EndpointError):
    """Raised when the assembled endpoint is not a valid URL."""

    def __init__(self, endpoint: str) -> None:
        self.endpoint = endpoint
        super().__init__(f"invalid endpoint: {endpoint!r}")


# Client lifecycle


class ClientNotInitialisedError(CloudcraftError):
    """Raised when the HTTP session is used before the client is opened.

    Open the client with ``await client.open()`` or ``async with client:``.
    """

    kind = ErrorKind.CLIENT_STATE


# Request execution


class RequestError(CloudcraftError):
    """Base exception for failures while executing a request."""


class RequestCancelledError(RequestError):
    """Raised when the caller's cancel event fires or its deadline passes.

    Attributes:
        deadline_exceeded: True when the per-call timeout expired, False when
            the cancel event was set.
    """

    kind = ErrorKind.CANCELLED

    def __init__(
        self, message: str = "request cancelled", *, deadline_exceeded: bool = False
    ) -> None:
        self.deadline_exceeded = deadline_exceeded
        super().__init__(message)


class TransportError(RequestError):
    """Raised when sending a request failed without receiving a response."""

    kind = ErrorKind.TRANSPORT


class RetriesExhaustedError(RequestError):
    """Raised when every attempt failed at the transport level.

    The last transport error is available as ``__cause__``.
    """

    kind = ErrorKind.RETRIES_EXHAUSTED

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"request failed after {attempts} attempts")


class RequestFailedError(RequestError):
    """Raised when the API answers with a non-success status code."""

    kind = ErrorKind.REQUEST_FAILED

    def __init__(self, status: int, *, method: str = "", url: str = "") -> None:
        self.status = status
        self.method = method
        self.url = url
        target = f" ({method} {url})" if method else ""
        super().__init__(f"request failed with status code: {status}{target}")


class BodyIOError(RequestError):
    """Base exception for response body I/O failures."""

    kind = ErrorKind.BODY_IO


class BodyReadError(BodyIOError):
    """Raised when the body of the final response cannot be read."""

    def __init__(self) -> None:
        super().__init__("cannot read response body")


class ResponseDrainError(BodyIOError):
    """Raised when a response body cannot be drained."""

    def __init__(self) -> None:
        super().__init__("cannot drain response body")


class ResponseCloseError(BodyIOError):
    """Raised when a response cannot be released back to the pool."""

    def __init__(self) -> None:
        super().__init__("cannot close response body")


# Resource arguments


class ValidationError(CloudcraftError):
    """Base exception for invalid arguments passed to resource operations."""

    kind = ErrorKind.VALIDATION


class MissingAccountError(ValidationError):
    def __init__(self) -> None:
        super().__init__("account cannot be None")


class MissingBlueprintError(ValidationError):
    def __init__(self) -> None:
        super().__init__("blueprint cannot be None")


class MissingBlueprintIDError(ValidationError):
    def __init__(self) -> None:
        super().__init__("missing blueprint ID")


class EmptyAccountNameError(ValidationError):
    def __init__(self) -> None:
        super().__init__("account name cannot be empty")


class EmptyAccountIDError(ValidationError):
    def __init__(self) -> None:
        super().__init__("account ID cannot be empty")


class EmptyRegionError(ValidationError):
    def __init__(self) -> None:
        super().__init__("region cannot be empty")


class EmptyRoleARNError(ValidationError):
    def __init__(self) -> None:
        super().__init__("role ARN cannot be empty")


class EmptyFieldError(ValidationError):
    """Raised when a required account field is empty."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"field {field!r} cannot be empty")


class EmptyApplicationIDError(EmptyFieldError):
    def __init__(self) -> None:
        super().__init__("application_id")


class EmptyDirectoryIDError(EmptyFieldError):
    def __init__(self) -> None:
        super().__init__("directory_id")


class EmptySubscriptionIDError(EmptyFieldError):
    def __init__(self) -> None:
        super().__init__("subscription_id")


class EmptyClientSecretError(EmptyFieldError):
    def __init__(self) -> None:
        super().__init__("client_secret")


# Response payloads


class DecodeError(CloudcraftError):
    """Base exception for response payloads with an unexpected shape."""

    kind = ErrorKind.DECODE


class ResponseDecodeError(DecodeError):
    """Raised when a response body is not the expected JSON document."""

    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(f"cannot decode response body as {model}")


class MissingResponseKeyError(DecodeError):
    """Raised when a list response does not contain the expected key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"key {key!r} not found in response")
