"""HTTP transport abstraction over aiohttp."""

import typing as t
from abc import ABC, abstractmethod

import aiohttp

from ...domain.exceptions import ClientNotInitialisedError
from ...domain.http import Request
from ..logging import get_logger
from .factories import create_session

if t.TYPE_CHECKING:
    import loguru


class BaseTransport(ABC):
    """Abstract base class for transports that send one HTTP attempt.

    Implementations must be safe to share between concurrent requests.
    """

    @abstractmethod
    async def open(self) -> None:
        """Acquire network resources. Calling it twice is a no-op."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
        pass

    @property
    @abstractmethod
    def closed(self) -> bool:
        """Whether the transport can no longer send requests."""
        pass

    @abstractmethod
    async def send(
        self, request: Request, body: bytes | None
    ) -> aiohttp.ClientResponse:
        """Send a single attempt of a request.

        Args:
            request: Request carrying method, URL and headers
            body: Buffered body for this attempt, or None

        Returns:
            The response with its body unread. The caller must release it.

        Raises:
            aiohttp.ClientError: On connection, TLS or protocol failures
            asyncio.TimeoutError: If the attempt exceeds the transport timeout
        """
        pass

    async def __aenter__(self) -> "BaseTransport":
        await self.open()
        return self

    async def __aexit__(self, *args: t.Any) -> None:
        await self.close()


class AiohttpTransport(BaseTransport):
    """Transport backed by a pooled aiohttp ClientSession.

    The session is created on open() unless one is provided. A provided
    session belongs to the caller and is never closed by the transport.
    Redirects are never followed, so 3xx responses reach the caller with the
    Authorization header untouched.
    """

    def __init__(
        self,
        timeout: float,
        session: aiohttp.ClientSession | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialise the transport.

        Args:
            timeout: Time limit for a single attempt, in seconds. Ignored when
                a session is provided.
            session: Existing session to borrow. If None, one is created by
                open() with create_session().
            logger: Logger for session lifecycle messages
        """
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None
        self._logger = logger

    @property
    def session(self) -> aiohttp.ClientSession:
        """The underlying session.

        Raises:
            ClientNotInitialisedError: If accessed before open()
        """
        if self._session is None:
            raise ClientNotInitialisedError(
                "HTTP session not initialised; use 'async with' or call open()"
            )
        return self._session

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    async def open(self) -> None:
        if self._session is not None and not self._session.closed:
            return
        if not self._owns_session:
            raise ClientNotInitialisedError("Provided HTTP session is closed")
        self._session = create_session(self.timeout)
        self._logger.debug(f"Opened HTTP session (timeout={self.timeout}s)")

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._logger.debug("Closed HTTP session")

    async def send(
        self, request: Request, body: bytes | None
    ) -> aiohttp.ClientResponse:
        return await self.session.request(
            request.method,
            request.url,
            headers=dict(request.headers),
            data=body,
            allow_redirects=False,
        )
