#!/usr/bin/env python3
"""
03_retry_events.py - Automatic retry with exponential backoff

Demonstrates:
- Subscribing to request.retrying / request.completed / request.failed
- Custom retry policy (also retrying 500 Internal Server Error)
- Cancelling a call that is waiting to retry

Runs offline against a local server that fails the first requests.
"""

import asyncio
from datetime import datetime

from aiohttp import web

from cloudcraft import Client, ClientConfig, RetryPolicy
from cloudcraft.domain import RequestCancelledError, RequestFailedError
from cloudcraft.domain.retry import default_is_retryable
from cloudcraft.events import (
    REQUEST_COMPLETED,
    REQUEST_FAILED,
    REQUEST_RETRYING,
    RequestCompletedEvent,
    RequestFailedEvent,
    RequestRetryingEvent,
)

FAILURES_BEFORE_SUCCESS = 3


def timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S.%f")[:-3]


def on_retry(event: RequestRetryingEvent) -> None:
    cause = f"status {event.status}" if event.status else event.error
    print(
        f"  [{timestamp()}] Retry {event.attempt}/{event.max_retries} "
        f"in {event.delay_seconds:.2f}s ({cause})"
    )


def on_completed(event: RequestCompletedEvent) -> None:
    print(
        f"  [{timestamp()}] {event.status} after {event.attempts} attempt(s) "
        f"in {event.elapsed_seconds:.2f}s"
    )


def on_failed(event: RequestFailedEvent) -> None:
    print(f"  [{timestamp()}] Failed ({event.kind}): {event.message}")


def create_server_app() -> web.Application:
    """Local stand-in for the API, flaky on purpose."""
    hits = {"count": 0}

    async def me(request: web.Request) -> web.Response:
        hits["count"] += 1
        if hits["count"] <= FAILURES_BEFORE_SUCCESS:
            return web.Response(status=503 if hits["count"] % 2 else 500)
        return web.json_response({"id": "u-1", "name": "Example User"})

    async def overloaded(request: web.Request) -> web.Response:
        return web.Response(status=429)

    app = web.Application()
    app.router.add_get("/user/me", me)
    app.router.add_get("/blueprint", overloaded)
    return app


def retry_server_errors(response, error) -> bool:
    """Default policy, plus 500 Internal Server Error."""
    if response is not None and response.status == 500:
        return True
    return default_is_retryable(response, error)


async def main() -> None:
    runner = web.AppRunner(create_server_app())
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    port = runner.addresses[0][1]

    config = ClientConfig(
        key="x" * 44,
        scheme="http",
        host="127.0.0.1",
        port=str(port),
        min_retry_delay=0.2,
        max_retry_delay=2.0,
        rate_limit=None,
    )
    policy = RetryPolicy(
        is_retryable=retry_server_errors,
        max_retries=5,
        min_retry_delay=config.min_retry_delay,
        max_retry_delay=config.max_retry_delay,
    )

    try:
        async with Client(config, retry_policy=policy) as client:
            client.emitter.on(REQUEST_RETRYING, on_retry)
            client.emitter.on(REQUEST_COMPLETED, on_completed)
            client.emitter.on(REQUEST_FAILED, on_failed)

            print("Example 1: transient failures, then success")
            user, _ = await client.user.me()
            print(f"  Got user {user.name}\n")

            print("Example 2: cancelling while waiting to retry")
            cancel = asyncio.Event()
            asyncio.get_running_loop().call_later(1.0, cancel.set)
            try:
                await client.blueprint.list(cancel=cancel)
            except RequestCancelledError as exc:
                print(f"  Cancelled: {exc}\n")

            print("Example 3: giving up after the last retry")
            try:
                await client.blueprint.list(timeout=30)
            except RequestFailedError as exc:
                print(f"  Gave up: {exc}")
    finally:
        await runner.cleanup()


if __name__ == "__main__":
    asyncio.run(main())
