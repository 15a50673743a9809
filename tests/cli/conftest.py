"""Shared fixtures for CLI tests."""

import pytest

from cloudcraft.cli.app import create_cli_app
from cloudcraft.client import Client
from cloudcraft.domain.http import Response
from cloudcraft.services import AWSService, AzureService, BlueprintService, UserService


@pytest.fixture
def ok_response():
    """Provide an empty 200 response for mocked service calls."""
    return Response(headers={}, body=b"", status=200)


@pytest.fixture
def mock_client(mocker):
    """Provide fully mocked Client with spec'd services."""
    mock = mocker.AsyncMock(spec=Client)
    # Configure context manager behavior
    mock.__aenter__.return_value = mock
    mock.__aexit__.return_value = None
    # Services are instance attributes, so spec=Client does not cover them
    mock.aws = mocker.AsyncMock(spec=AWSService)
    mock.azure = mocker.AsyncMock(spec=AzureService)
    mock.blueprint = mocker.AsyncMock(spec=BlueprintService)
    mock.user = mocker.AsyncMock(spec=UserService)
    return mock


@pytest.fixture
def client_configs():
    """Collects every ClientConfig the CLI built a client from."""
    return []


@pytest.fixture
def app_with_mock_client(test_settings, mock_client, client_configs):
    """CLI app whose commands receive the mocked client."""

    def factory(config):
        client_configs.append(config)
        return mock_client

    return create_cli_app(settings=test_settings, client_factory=factory)
