"""Domain models for retry decisions and exponential backoff."""

import asyncio
import random
import typing as t
from dataclasses import dataclass, field

from .exceptions import InvalidRetryPolicyError, RequestCancelledError

if t.TYPE_CHECKING:
    import aiohttp

DEFAULT_MAX_RETRIES = 3
DEFAULT_MIN_RETRY_DELAY = 1.0  # seconds
DEFAULT_MAX_RETRY_DELAY = 30.0  # seconds

BACKOFF_FACTOR = 2.0
JITTER_FACTOR = 0.1

# Status codes worth another attempt. The API answers 202 while a request is
# accepted but not processed yet, which is "not ready" for a synchronous client.
RETRYABLE_STATUS_CODES = frozenset(
    {
        202,  # Accepted
        408,  # Request Timeout
        429,  # Too Many Requests
        502,  # Bad Gateway
        503,  # Service Unavailable
        504,  # Gateway Timeout
    }
)

IsRetryable = t.Callable[
    ["aiohttp.ClientResponse | None", "BaseException | None"], bool
]


def default_is_retryable(
    response: "aiohttp.ClientResponse | None", error: BaseException | None
) -> bool:
    """Decide whether an attempt outcome should be retried.

    Any transport error is retryable. A response is retryable when its status
    is in RETRYABLE_STATUS_CODES.

    Args:
        response: Response received for the attempt, if any
        error: Transport error raised by the attempt, if any

    Returns:
        True if the request should be sent again
    """
    if error is not None:
        return True

    if response is None:
        return False

    return response.status in RETRYABLE_STATUS_CODES


@dataclass(frozen=True)
class RetryPolicy:
    """Policy for retrying requests with exponential backoff and jitter.

    Instances are immutable and shared read-only by every request a client
    issues, so one policy can serve any number of concurrent calls.

    Attributes:
        is_retryable: Predicate over (response, error) deciding whether an
            attempt outcome should be retried
        max_retries: Retries after the first attempt (total attempts is
            max_retries + 1)
        min_retry_delay: Delay before the first retry, in seconds
        max_retry_delay: Upper bound for any delay before jitter, in seconds
    """

    is_retryable: IsRetryable = field(default=default_is_retryable)
    max_retries: int = DEFAULT_MAX_RETRIES
    min_retry_delay: float = DEFAULT_MIN_RETRY_DELAY
    max_retry_delay: float = DEFAULT_MAX_RETRY_DELAY

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise InvalidRetryPolicyError(
                f"max_retries must be non-negative, got {self.max_retries}"
            )
        if self.min_retry_delay < 0:
            raise InvalidRetryPolicyError(
                f"min_retry_delay must be non-negative, got {self.min_retry_delay}"
            )
        if self.min_retry_delay > self.max_retry_delay:
            raise InvalidRetryPolicyError(
                "min_retry_delay must not exceed max_retry_delay "
                f"({self.min_retry_delay} > {self.max_retry_delay})"
            )

    def backoff(self, attempt: int) -> float:
        """
        Calculate the unjittered delay for a retry attempt.

        Formula: min(min_retry_delay * 2 ^ attempt, max_retry_delay)

        Args:
            attempt: Attempt that just failed (0-indexed)

        Returns:
            Delay in seconds

        Examples:
            >>> policy = RetryPolicy(min_retry_delay=1.0, max_retry_delay=30.0)
            >>> policy.backoff(0)
            1.0
            >>> policy.backoff(3)
            8.0
            >>> policy.backoff(10)
            30.0
        """
        delay = self.min_retry_delay * (BACKOFF_FACTOR**attempt)
        return min(delay, self.max_retry_delay)

    def jittered_delay(self, attempt: int) -> float:
        """Backoff delay with symmetric jitter of up to ±10% applied."""
        delay = self.backoff(attempt)
        jitter = random.uniform(-1.0, 1.0) * JITTER_FACTOR * delay
        return delay + jitter

    async def wait(self, attempt: int, cancel: asyncio.Event | None = None) -> None:
        """Block until it is time to retry, or until cancellation.

        Args:
            attempt: Attempt that just failed (0-indexed)
            cancel: Optional event that aborts the wait when set

        Raises:
            RequestCancelledError: If cancel is set before the delay elapses
        """
        await self.sleep(self.jittered_delay(attempt), cancel)

    async def sleep(self, delay: float, cancel: asyncio.Event | None = None) -> None:
        """Sleep for delay seconds unless cancel fires first.

        Task cancellation propagates as asyncio.CancelledError; only the cancel
        event is translated into RequestCancelledError.
        """
        if cancel is None:
            await asyncio.sleep(delay)
            return

        if cancel.is_set():
            raise RequestCancelledError("request cancelled before retry")

        try:
            await asyncio.wait_for(cancel.wait(), timeout=delay)
        except TimeoutError:
            return

        raise RequestCancelledError("request cancelled while waiting to retry")
