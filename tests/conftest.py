"""Pytest configuration and fixtures for cloudcraft tests."""

import typing as t

import loguru
import pytest
import pytest_asyncio
from aioresponses import aioresponses
from blockbuster import BlockBuster, blockbuster_ctx
from typer.testing import CliRunner

from cloudcraft.app import create_app
from cloudcraft.cli.app import create_cli_app
from cloudcraft.client import Client
from cloudcraft.config import ClientConfig
from cloudcraft.config.settings import Environment, LogLevel, Settings
from cloudcraft.domain.retry import RetryPolicy
from cloudcraft.events import BaseEmitter, EventEmitter
from cloudcraft.infrastructure.http import AiohttpTransport
from cloudcraft.infrastructure.logging import reset_logging

API_KEY = "k" * 44
BASE_URL = "https://api.cloudcraft.co"


@pytest.fixture(autouse=True)
def blockbuster() -> t.Iterator[BlockBuster]:
    """Detect blocking calls in the async event loop during tests.

    Every test runs with Blockbuster active, so a BlockingError is raised
    when cloudcraft code performs blocking I/O (such as a synchronous
    mkdir or file write) while the event loop is running.
    """
    with blockbuster_ctx(
        scanned_modules=["cloudcraft"],
    ) as bb:
        # Third party modules use these functions, so we deactivate them
        # for now
        bb.functions["os.path.abspath"].deactivate()

        yield bb


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def no_proxy(monkeypatch):
    """Keep requests to local test servers off any proxy set in the environment."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def mock_emitter(mocker):
    """Provide a mock event emitter for testing event emission."""
    emitter = mocker.AsyncMock(spec=BaseEmitter)
    return emitter


@pytest.fixture
def real_emitter(mock_logger):
    """Provide a real EventEmitter for tests that subscribe handlers."""
    return EventEmitter(mock_logger)


@pytest.fixture
def fast_policy():
    """Retry policy with millisecond delays so retry tests stay fast."""
    return RetryPolicy(max_retries=3, min_retry_delay=0.001, max_retry_delay=0.005)


@pytest.fixture
def client_config():
    """Valid config pointing at the public API host, without rate limiting."""
    return ClientConfig(
        key=API_KEY,
        min_retry_delay=0.001,
        max_retry_delay=0.005,
        rate_limit=None,
    )


@pytest_asyncio.fixture
async def transport(mock_logger):
    """Provide an opened AiohttpTransport."""
    async with AiohttpTransport(timeout=5.0, logger=mock_logger) as opened:
        yield opened


@pytest_asyncio.fixture
async def client(client_config, mock_logger):
    """Provide an opened Client using the test config."""
    async with Client(client_config, logger=mock_logger) as opened:
        yield opened


@pytest.fixture
def mock_api():
    """Intercept every aiohttp request made during the test."""
    with aioresponses() as mocked:
        yield mocked


@pytest.fixture
def sent_requests(mock_api):
    """Provide a function listing intercepted requests as (method, url, kwargs).

    Requests to the same URL are listed in the order they were sent.
    """

    def collect() -> list[tuple[str, str, dict]]:
        calls = []
        for (method, url), requests in mock_api.requests.items():
            for request in requests:
                calls.append((method, str(url), request.kwargs))
        return calls

    return collect


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
