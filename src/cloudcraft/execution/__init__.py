"""Request execution - retries, body replay and rate limiting."""

from .body import buffer_body, drain_response, read_body
from .executor import MAX_SUCCESS_STATUS, TRANSPORT_ERRORS, RequestExecutor
from .rate_limit import BaseRateLimiter, NullRateLimiter, RateLimiter

__all__ = [
    "BaseRateLimiter",
    "MAX_SUCCESS_STATUS",
    "NullRateLimiter",
    "RateLimiter",
    "RequestExecutor",
    "TRANSPORT_ERRORS",
    "buffer_body",
    "drain_response",
    "read_body",
]
