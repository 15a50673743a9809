"""CLI state container."""

import dataclasses
import typing as t

from ..client import Client
from ..config import ClientConfig, Settings

ClientFactory = t.Callable[[ClientConfig], Client]


class CLIState:
    """Application state shared by CLI commands.

    Holds the Settings and builds API clients from the environment with the
    global command line overrides applied.
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: ClientFactory | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
    ):
        self.settings = settings
        self.timeout = timeout
        self.max_retries = max_retries
        self._client_factory = client_factory or Client

    def client_config(self) -> ClientConfig:
        """ClientConfig from CLOUDCRAFT_* variables plus command line overrides."""
        overrides: dict[str, t.Any] = {}
        if self.timeout is not None:
            overrides["timeout"] = self.timeout
        if self.max_retries is not None:
            overrides["max_retries"] = self.max_retries
        return dataclasses.replace(ClientConfig.from_env(), **overrides)

    def create_client(self) -> Client:
        """Build a client. Raises ConfigError if the environment is incomplete."""
        return self._client_factory(self.client_config())
