"""Request and response value objects exchanged with the executor."""

import json
import typing as t
from dataclasses import dataclass, field

from .exceptions import ResponseDecodeError

# Anything the executor can buffer into bytes before the first attempt
RequestBody = (
    bytes
    | bytearray
    | memoryview
    | str
    | t.IO[bytes]
    | t.IO[str]
    | t.AsyncIterable[bytes]
    | t.AsyncIterable[str]
)


@dataclass(frozen=True)
class Request:
    """A prepared HTTP request.

    Headers (including authorisation) are expected to be attached already.
    The body may be a one-shot stream: the executor reads it exactly once and
    replays the buffered bytes on every attempt.
    """

    method: str
    url: str
    headers: t.Mapping[str, str] = field(default_factory=dict)
    body: RequestBody | None = None


@dataclass(frozen=True)
class Response:
    """A fully read API response.

    Attributes:
        headers: Header names mapped to every value received, in order
        body: Complete response body
        status: HTTP status code
    """

    headers: dict[str, list[str]]
    body: bytes
    status: int

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of a header, matching names case-insensitively."""
        wanted = name.lower()
        for key, values in self.headers.items():
            if key.lower() == wanted and values:
                return values[0]
        return default

    def json(self) -> t.Any:
        """Decode the body as JSON.

        Raises:
            ResponseDecodeError: If the body is not valid JSON
        """
        try:
            return json.loads(self.body)
        except ValueError as exc:
            raise ResponseDecodeError("JSON") from exc
