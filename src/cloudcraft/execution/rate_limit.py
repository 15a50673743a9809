"""Client-side request rate limiting."""

import asyncio
import time
import typing as t
from abc import ABC, abstractmethod
from collections import deque

from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru


class BaseRateLimiter(ABC):
    """Abstract base class for rate limiters consulted before each send."""

    @abstractmethod
    async def acquire(self) -> None:
        """Wait until another request may be sent."""
        pass


class NullRateLimiter(BaseRateLimiter):
    """Rate limiter that never waits."""

    async def acquire(self) -> None:
        pass


class RateLimiter(BaseRateLimiter):
    """Sliding window rate limiter.

    Allows at most max_requests sends in any time_window seconds. The API
    enforces its own limits server side; limiting here keeps a busy client
    from burning its retries on 429 responses.
    """

    def __init__(
        self,
        max_requests: int,
        time_window: float = 1.0,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialise the rate limiter.

        Args:
            max_requests: Sends allowed per window. Must be at least 1.
            time_window: Window length in seconds
            logger: Logger for throttling messages

        Raises:
            ValueError: If max_requests < 1 or time_window <= 0
        """
        if max_requests < 1:
            raise ValueError(f"max_requests must be at least 1, got {max_requests}")
        if time_window <= 0:
            raise ValueError(f"time_window must be positive, got {time_window}")

        self.max_requests = max_requests
        self.time_window = time_window
        self._logger = logger
        self._timestamps: deque[float] = deque()
        self._lock = asyncio.Lock()

    @classmethod
    def per_second(
        cls, rate: float, logger: "loguru.Logger" = get_logger(__name__)
    ) -> "RateLimiter":
        """Build a limiter that spaces requests 1/rate seconds apart.

        No bursts are allowed, e.g. 2 sends one request every 0.5s and 0.5
        sends one every 2s.
        """
        if rate <= 0:
            raise ValueError(f"rate must be positive, got {rate}")
        return cls(max_requests=1, time_window=1.0 / rate, logger=logger)

    def _discard_expired(self, now: float) -> None:
        while self._timestamps and now - self._timestamps[0] >= self.time_window:
            self._timestamps.popleft()

    async def acquire(self) -> None:
        # Holding the lock while sleeping keeps waiters in FIFO order
        async with self._lock:
            while True:
                now = time.monotonic()
                self._discard_expired(now)
                if len(self._timestamps) < self.max_requests:
                    self._timestamps.append(now)
                    return

                wait_time = self._timestamps[0] + self.time_window - now
                self._logger.debug(f"Rate limit reached, waiting {wait_time:.2f}s")
                await asyncio.sleep(wait_time)
