"""Domain layer - errors, endpoints, retry policy and HTTP value objects."""

from .endpoint import parse_endpoint
from .exceptions import (
    BodyIOError,
    BodyReadError,
    ClientNotInitialisedError,
    CloudcraftError,
    ConfigError,
    DecodeError,
    EmptyAccountIDError,
    EmptyAccountNameError,
    EmptyApplicationIDError,
    EmptyClientSecretError,
    EmptyDirectoryIDError,
    EmptyFieldError,
    EmptyRegionError,
    EmptyRoleARNError,
    EmptySubscriptionIDError,
    EndpointError,
    ErrorKind,
    InvalidEndpointError,
    InvalidKeyError,
    InvalidRetryPolicyError,
    InvalidSchemeError,
    MissingAccountError,
    MissingBlueprintError,
    MissingBlueprintIDError,
    MissingEndpointHostError,
    MissingEndpointSchemeError,
    MissingFragmentError,
    MissingKeyError,
    MissingResponseKeyError,
    RequestCancelledError,
    RequestError,
    RequestFailedError,
    ResponseCloseError,
    ResponseDecodeError,
    ResponseDrainError,
    RetriesExhaustedError,
    TransportError,
    ValidationError,
)
from .http import Request, RequestBody, Response
from .retry import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_MAX_RETRY_DELAY,
    DEFAULT_MIN_RETRY_DELAY,
    RETRYABLE_STATUS_CODES,
    IsRetryable,
    RetryPolicy,
    default_is_retryable,
)

__all__ = [
    # Endpoint
    "parse_endpoint",
    # HTTP
    "Request",
    "RequestBody",
    "Response",
    # Retry
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_MAX_RETRY_DELAY",
    "DEFAULT_MIN_RETRY_DELAY",
    "RETRYABLE_STATUS_CODES",
    "IsRetryable",
    "RetryPolicy",
    "default_is_retryable",
    # Exceptions
    "BodyIOError",
    "BodyReadError",
    "ClientNotInitialisedError",
    "CloudcraftError",
    "ConfigError",
    "DecodeError",
    "EmptyAccountIDError",
    "EmptyAccountNameError",
    "EmptyApplicationIDError",
    "EmptyClientSecretError",
    "EmptyDirectoryIDError",
    "EmptyFieldError",
    "EmptyRegionError",
    "EmptyRoleARNError",
    "EmptySubscriptionIDError",
    "EndpointError",
    "ErrorKind",
    "InvalidEndpointError",
    "InvalidKeyError",
    "InvalidRetryPolicyError",
    "InvalidSchemeError",
    "MissingAccountError",
    "MissingBlueprintError",
    "MissingBlueprintIDError",
    "MissingEndpointHostError",
    "MissingEndpointSchemeError",
    "MissingFragmentError",
    "MissingKeyError",
    "MissingResponseKeyError",
    "RequestCancelledError",
    "RequestError",
    "RequestFailedError",
    "ResponseCloseError",
    "ResponseDecodeError",
    "ResponseDrainError",
    "RetriesExhaustedError",
    "TransportError",
    "ValidationError",
]
