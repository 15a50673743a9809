"""API resource services attached to the Client."""

from .account import AccountService
from .aws import AWSService
from .azure import AzureService
from .base import BaseService, join_path
from .blueprint import BlueprintService
from .user import UserService

__all__ = [
    "AccountService",
    "AWSService",
    "AzureService",
    "BaseService",
    "BlueprintService",
    "UserService",
    "join_path",
]
