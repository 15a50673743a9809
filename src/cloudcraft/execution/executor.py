"""Executes one logical API call with retries, replay and cleanup."""

import asyncio
import time
import typing as t

import aiohttp

from ..domain.exceptions import (
    BodyIOError,
    ErrorKind,
    RequestCancelledError,
    RequestError,
    RequestFailedError,
    RetriesExhaustedError,
    TransportError,
)
from ..domain.http import Request, Response
from ..domain.retry import RetryPolicy
from ..events import (
    REQUEST_COMPLETED,
    REQUEST_FAILED,
    REQUEST_RETRYING,
    BaseEmitter,
    NullEmitter,
    RequestCompletedEvent,
    RequestFailedEvent,
    RequestRetryingEvent,
)
from ..infrastructure.http import BaseTransport
from ..infrastructure.logging import get_logger
from .body import buffer_body, drain_response, read_body
from .rate_limit import BaseRateLimiter, NullRateLimiter

if t.TYPE_CHECKING:
    import loguru

T = t.TypeVar("T")

# Failures of a single attempt that produce no response
TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)

# Highest status the API uses for success (204 No Content)
MAX_SUCCESS_STATUS = 204


def _release_orphan(task: "asyncio.Future[t.Any]") -> None:
    """Release the response of a send that finished after being abandoned."""
    if task.cancelled() or task.exception() is not None:
        return
    result = task.result()
    if isinstance(result, aiohttp.ClientResponse):
        result.release()


def _abandon(task: "asyncio.Future[t.Any]") -> None:
    task.cancel()
    task.add_done_callback(_release_orphan)


def _collect_headers(response: aiohttp.ClientResponse) -> dict[str, list[str]]:
    headers: dict[str, list[str]] = {}
    for name, value in response.headers.items():
        headers.setdefault(name, []).append(value)
    return headers


class _Call:
    """Mutable bookkeeping for one execute() call."""

    def __init__(self, request: Request) -> None:
        self.request = request
        self.attempts = 0
        self.started = time.monotonic()

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.started


class RequestExecutor:
    """Runs requests to completion, retrying transient failures.

    For each call the executor:
    - buffers the request body once and sends the same bytes on every attempt
    - waits for the rate limiter before every send
    - retries transport errors and retryable statuses with backoff
    - drains each discarded response so its connection returns to the pool
    - reads the final body into memory and releases the response on every path

    The executor holds no per-call state, so one instance can serve any number
    of concurrent calls. Transport, policy and rate limiter are shared.

    Cancellation:
    - timeout bounds the whole call, attempts and waits included
    - setting the cancel event aborts the rate limit wait, the in-flight send
      or the backoff wait, whichever is pending
    - cancelling the calling task propagates asyncio.CancelledError unchanged
    """

    def __init__(
        self,
        transport: BaseTransport,
        policy: RetryPolicy | None = None,
        rate_limiter: BaseRateLimiter | None = None,
        emitter: BaseEmitter | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialise the executor.

        Args:
            transport: Opened transport used to send each attempt
            policy: Retry policy. Defaults to RetryPolicy().
            rate_limiter: Limiter consulted before every send.
                If None, a NullRateLimiter is used (no limiting).
            emitter: Emitter for request lifecycle events.
                If None, a NullEmitter is used.
            logger: Logger for retries and failures
        """
        self.transport = transport
        self.policy = policy or RetryPolicy()
        self.rate_limiter = rate_limiter or NullRateLimiter()
        self._emitter = emitter or NullEmitter()
        self.logger = logger

    @property
    def emitter(self) -> BaseEmitter:
        """Event emitter for request lifecycle events."""
        return self._emitter

    async def execute(
        self,
        request: Request,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> Response:
        """Execute a request, retrying transient failures.

        Args:
            request: Request with headers already attached
            timeout: Deadline for the whole call in seconds, or None
            cancel: Event that aborts the call when set

        Returns:
            The fully read response of the final attempt

        Raises:
            RequestCancelledError: If cancel was set or the timeout expired
            RetriesExhaustedError: If every attempt failed without a response
            TransportError: If an attempt failed with an error the retry
                policy does not retry
            RequestFailedError: If the final status is not a success, or a
                retryable status was still returned after the last retry
            BodyReadError: If the final body could not be read
        """
        call = _Call(request)
        scope = asyncio.timeout(timeout)
        try:
            try:
                async with scope:
                    response = await self._execute(call, cancel)
            except TimeoutError as exc:
                if not scope.expired():
                    raise
                raise RequestCancelledError(
                    "request deadline exceeded", deadline_exceeded=True
                ) from exc
        except RequestError as exc:
            await self._report_failure(call, exc)
            raise

        self.logger.debug(
            f"{request.method} {request.url} -> {response.status} "
            f"({call.attempts} attempt(s), {call.elapsed:.2f}s)"
        )
        await self._emitter.emit(
            REQUEST_COMPLETED,
            RequestCompletedEvent(
                method=request.method,
                url=request.url,
                status=response.status,
                attempts=call.attempts,
                elapsed_seconds=call.elapsed,
            ),
        )
        return response

    async def _execute(self, call: _Call, cancel: asyncio.Event | None) -> Response:
        request = call.request
        body = await buffer_body(request.body)
        max_retries = self.policy.max_retries

        response: aiohttp.ClientResponse | None = None
        error: BaseException | None = None
        retryable = False

        for attempt in range(max_retries + 1):
            response, error = await self._send(call, body, cancel)

            try:
                retryable = self.policy.is_retryable(response, error)
            except Exception:
                if response is not None:
                    response.release()
                raise

            if not retryable or attempt == max_retries:
                break

            if response is not None:
                await self._discard(response)

            delay = self.policy.jittered_delay(attempt)
            status = response.status if response is not None else None
            reason = f"status {status}" if error is None else repr(error)
            self.logger.warning(
                f"Retrying {request.method} {request.url} "
                f"(attempt {attempt + 2}/{max_retries + 1}) in {delay:.2f}s "
                f"after {reason}"
            )
            await self._emitter.emit(
                REQUEST_RETRYING,
                RequestRetryingEvent(
                    method=request.method,
                    url=request.url,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    delay_seconds=max(delay, 0.0),
                    status=status,
                    error=None if error is None else str(error),
                ),
            )
            await self.policy.sleep(delay, cancel)

        if response is None:
            if retryable:
                raise RetriesExhaustedError(call.attempts) from error
            if cancel is not None and cancel.is_set():
                raise RequestCancelledError() from error
            raise TransportError(
                f"{request.method} {request.url}: {error!r}"
            ) from error

        try:
            if retryable or response.status > MAX_SUCCESS_STATUS:
                await self._discard(response)
                raise RequestFailedError(
                    response.status, method=request.method, url=request.url
                )
            payload = await read_body(response)
            return Response(
                headers=_collect_headers(response),
                body=payload,
                status=response.status,
            )
        finally:
            response.release()

    async def _send(
        self, call: _Call, body: bytes | None, cancel: asyncio.Event | None
    ) -> tuple[aiohttp.ClientResponse | None, BaseException | None]:
        """Send one attempt, returning either a response or a transport error."""
        request = call.request
        if cancel is not None and cancel.is_set():
            raise RequestCancelledError()

        await self._until_cancelled(
            self.rate_limiter.acquire(), cancel, "waiting for rate limit"
        )
        call.attempts += 1
        try:
            response = await self._until_cancelled(
                self.transport.send(request, body), cancel, "during send"
            )
        except TRANSPORT_ERRORS as exc:
            return None, exc
        return response, None

    async def _until_cancelled(
        self,
        awaitable: t.Awaitable[T],
        cancel: asyncio.Event | None,
        stage: str,
    ) -> T:
        """Await awaitable, aborting it if cancel is set first.

        A response produced by an abandoned send is released when it arrives.
        """
        if cancel is None:
            return await awaitable

        task = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            _abandon(task)
            raise
        finally:
            waiter.cancel()

        if cancel.is_set():
            _abandon(task)
            raise RequestCancelledError(f"request cancelled {stage}")
        return task.result()

    async def _discard(self, response: aiohttp.ClientResponse) -> None:
        """Drain a response that will not be returned, logging failures."""
        try:
            await drain_response(response)
        except BodyIOError as exc:
            self.logger.warning(
                f"{exc} for {response.method} {response.url}: {exc.__cause__!r}"
            )

    async def _report_failure(self, call: _Call, exc: RequestError) -> None:
        request = call.request
        message = f"{request.method} {request.url} failed: {exc}"
        match exc.kind:
            case ErrorKind.CANCELLED:
                self.logger.info(message)
            case _:
                self.logger.error(message)

        await self._emitter.emit(
            REQUEST_FAILED,
            RequestFailedEvent(
                method=request.method,
                url=request.url,
                kind=exc.kind.value,
                message=str(exc),
                attempts=call.attempts,
            ),
        )
