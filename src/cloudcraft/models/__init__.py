"""API payload models and query parameters."""

from .accounts import AWSAccount, AzureAccount, IAMParams, IAMPolicy, IAMStatement
from .base import ApiModel
from .blueprint import Blueprint, BlueprintData, LiveAccount, LiveOptions, Theme
from .params import (
    DEFAULT_BUDGET_FORMAT,
    DEFAULT_CURRENCY,
    DEFAULT_HEIGHT,
    DEFAULT_IMAGE_FORMAT,
    DEFAULT_PERIOD,
    DEFAULT_SNAPSHOT_FORMAT,
    DEFAULT_WIDTH,
    BudgetExportParams,
    ImageExportParams,
    SnapshotParams,
)
from .user import User

__all__ = [
    "ApiModel",
    # Accounts
    "AWSAccount",
    "AzureAccount",
    "IAMParams",
    "IAMPolicy",
    "IAMStatement",
    # Blueprints
    "Blueprint",
    "BlueprintData",
    "LiveAccount",
    "LiveOptions",
    "Theme",
    # Users
    "User",
    # Query parameters
    "BudgetExportParams",
    "ImageExportParams",
    "SnapshotParams",
    "DEFAULT_BUDGET_FORMAT",
    "DEFAULT_CURRENCY",
    "DEFAULT_HEIGHT",
    "DEFAULT_IMAGE_FORMAT",
    "DEFAULT_PERIOD",
    "DEFAULT_SNAPSHOT_FORMAT",
    "DEFAULT_WIDTH",
]
