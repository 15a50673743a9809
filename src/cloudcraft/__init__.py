"""Async client for the Cloudcraft developer API."""

from .app import App, create_app
from .client import Client
from .config import ClientConfig, Settings
from .domain import (
    CloudcraftError,
    ErrorKind,
    Request,
    RequestFailedError,
    Response,
    RetryPolicy,
)
from .meta import VERSION
from .models import (
    AWSAccount,
    AzureAccount,
    Blueprint,
    BlueprintData,
    BudgetExportParams,
    ImageExportParams,
    SnapshotParams,
    User,
)

__version__ = VERSION

__all__ = [
    "App",
    "AWSAccount",
    "AzureAccount",
    "Blueprint",
    "BlueprintData",
    "BudgetExportParams",
    "Client",
    "ClientConfig",
    "CloudcraftError",
    "ErrorKind",
    "ImageExportParams",
    "Request",
    "RequestFailedError",
    "Response",
    "RetryPolicy",
    "Settings",
    "SnapshotParams",
    "User",
    "create_app",
]
