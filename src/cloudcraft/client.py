"""Cloudcraft API client."""

import asyncio
import typing as t
from urllib.parse import urlencode

import aiohttp
from pydantic import HttpUrl

from .config import ClientConfig
from .domain.endpoint import parse_endpoint
from .domain.exceptions import ClientNotInitialisedError
from .domain.http import Request, RequestBody, Response
from .domain.retry import RetryPolicy
from .events import BaseEmitter, EventEmitter
from .execution import BaseRateLimiter, NullRateLimiter, RateLimiter, RequestExecutor
from .infrastructure.http import AiohttpTransport, BaseTransport
from .infrastructure.logging import get_logger
from .meta import USER_AGENT
from .services import AWSService, AzureService, BlueprintService, UserService

if t.TYPE_CHECKING:
    import loguru

JSON_CONTENT_TYPE = "application/json"


class Client:
    """Async client for the Cloudcraft developer API.

    Usage:
        async with Client(ClientConfig(key=api_key)) as client:
            blueprints, _ = await client.blueprint.list()

    Construction validates the configuration, so a client that exists can
    always build requests. All attributes are read-only after construction
    and one client can be shared by any number of concurrent tasks.

    Resource operations are grouped in services:
    - client.aws: AWS accounts, snapshots and IAM role setup
    - client.azure: Azure accounts and snapshots
    - client.blueprint: blueprints and their image and budget exports
    - client.user: the current user
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: BaseTransport | None = None,
        retry_policy: RetryPolicy | None = None,
        rate_limiter: BaseRateLimiter | None = None,
        emitter: BaseEmitter | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialise the client.

        Args:
            config: Connection settings. If None, read from CLOUDCRAFT_*
                environment variables.
            session: aiohttp session to borrow instead of creating one. It is
                not closed by the client.
            transport: Transport to send requests with. Overrides session.
            retry_policy: Retry policy. Defaults to one built from config.
            rate_limiter: Rate limiter. Defaults to config.rate_limit
                requests per second, or no limit if that is None.
            emitter: Event emitter for request lifecycle events.
                If None, a new EventEmitter is created.
            logger: Logger for the client and its executor

        Raises:
            ConfigError: If the configuration is invalid
        """
        config = config if config is not None else ClientConfig.from_env()
        config.validate()

        self._config = config
        self._endpoint = parse_endpoint(
            config.scheme, config.host, config.port, config.path
        )
        self._logger = logger

        self.transport = transport or AiohttpTransport(
            config.timeout, session=session, logger=logger
        )
        self.retry_policy = retry_policy or RetryPolicy(
            max_retries=config.max_retries,
            min_retry_delay=config.min_retry_delay,
            max_retry_delay=config.max_retry_delay,
        )
        if rate_limiter is None:
            rate_limiter = (
                RateLimiter.per_second(config.rate_limit, logger=logger)
                if config.rate_limit
                else NullRateLimiter()
            )
        self._emitter = emitter or EventEmitter(logger)
        self._executor = RequestExecutor(
            self.transport,
            self.retry_policy,
            rate_limiter=rate_limiter,
            emitter=self._emitter,
            logger=logger,
        )

        self.aws = AWSService(self)
        self.azure = AzureService(self)
        self.blueprint = BlueprintService(self)
        self.user = UserService(self)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def endpoint(self) -> HttpUrl:
        """Base URL every resource path is resolved against."""
        return self._endpoint

    @property
    def emitter(self) -> BaseEmitter:
        """Event emitter receiving request.* events."""
        return self._emitter

    async def open(self) -> None:
        await self.transport.open()
        self._logger.debug(f"Client opened for {self._endpoint}")

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self) -> "Client":
        await self.open()
        return self

    async def __aexit__(self, *args: t.Any) -> None:
        await self.close()

    def url(self, path: str, params: t.Mapping[str, str] | None = None) -> str:
        """Resolve a resource path and optional query against the endpoint.

        Examples:
            >>> client.url("blueprint/abc/png", {"width": "1920"})
            'https://api.cloudcraft.co/blueprint/abc/png?width=1920'
        """
        url = f"{str(self._endpoint).rstrip('/')}/{path.lstrip('/')}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def build_request(
        self,
        method: str,
        path: str,
        *,
        body: RequestBody | None = None,
        params: t.Mapping[str, str] | None = None,
        headers: t.Mapping[str, str] | None = None,
        json_body: bool = True,
    ) -> Request:
        """Prepare an authenticated request for a resource path.

        Args:
            method: HTTP method
            path: Path relative to the endpoint, e.g. "blueprint/abc"
            body: Request body, sent identically on every attempt
            params: Query string values
            headers: Extra headers, applied last
            json_body: Send Content-Type: application/json. Binary exports
                turn it off.
        """
        request_headers = {
            "Authorization": f"Bearer {self._config.key}",
            "User-Agent": USER_AGENT,
        }
        if json_body:
            request_headers["Content-Type"] = JSON_CONTENT_TYPE
        if headers:
            request_headers.update(headers)

        return Request(
            method=method,
            url=self.url(path, params),
            headers=request_headers,
            body=body,
        )

    async def do(
        self,
        request: Request,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> Response:
        """Execute a prepared request with retries.

        Args:
            request: Request from build_request()
            timeout: Deadline for the whole call, retries included
            cancel: Event that aborts the call when set

        Raises:
            ClientNotInitialisedError: If the client is not open
            RequestError: See RequestExecutor.execute
        """
        if self.transport.closed:
            raise ClientNotInitialisedError(
                "Client not initialised; use 'async with' or call open()"
            )
        return await self._executor.execute(request, timeout=timeout, cancel=cancel)
