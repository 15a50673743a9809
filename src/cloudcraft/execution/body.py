"""Request body buffering and response body release."""

import asyncio
import inspect
import typing as t

import aiohttp

from ..domain.exceptions import BodyReadError, ResponseCloseError, ResponseDrainError
from ..domain.http import RequestBody


def _to_bytes(data: t.Any) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


async def buffer_body(body: RequestBody | None) -> bytes | None:
    """Read a request body into memory once so it can be replayed.

    Streams can only be consumed once, so the executor buffers the body up
    front and sends the same bytes on every attempt.

    Args:
        body: Bytes-like, str, an object with a sync or async read(), or an
            async iterable of chunks. Text is UTF-8 encoded wherever it appears.

    Returns:
        The complete body, or None if there is none

    Raises:
        TypeError: If the body type is not supported
    """
    if body is None:
        return None

    if isinstance(body, str):
        return body.encode("utf-8")

    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body)

    if hasattr(body, "__aiter__"):
        buffer = bytearray()
        async for chunk in t.cast(t.AsyncIterable[bytes | str], body):
            buffer.extend(_to_bytes(chunk))
        return bytes(buffer)

    read = getattr(body, "read", None)
    if read is not None:
        data = read()
        if inspect.isawaitable(data):
            data = await data
        return _to_bytes(data)

    raise TypeError(f"Unsupported request body type: {type(body).__name__}")


async def drain_response(response: aiohttp.ClientResponse) -> None:
    """Read and discard the rest of a response body, then release it.

    Draining lets the connection go back to the pool instead of being closed.

    Raises:
        ResponseDrainError: If reading the body fails. The connection is
            closed instead of released.
        ResponseCloseError: If releasing the connection fails
    """
    try:
        async for _ in response.content.iter_any():
            pass
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        response.close()
        raise ResponseDrainError() from exc
    except asyncio.CancelledError:
        response.close()
        raise

    try:
        response.release()
    except (aiohttp.ClientError, OSError) as exc:
        raise ResponseCloseError() from exc


async def read_body(response: aiohttp.ClientResponse) -> bytes:
    """Read the complete body of the final response.

    Raises:
        BodyReadError: If the body cannot be read to the end
    """
    try:
        return await response.read()
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        raise BodyReadError() from exc
