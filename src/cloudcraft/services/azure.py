"""Azure account operations."""

from ..domain.exceptions import (
    EmptyAccountNameError,
    EmptyApplicationIDError,
    EmptyClientSecretError,
    EmptyDirectoryIDError,
    EmptySubscriptionIDError,
)
from ..models.accounts import AzureAccount
from .account import AccountService


class AzureService(AccountService[AzureAccount]):
    """Operations on the "azure/account" resource."""

    path = "azure/account"
    model = AzureAccount

    def _validate(self, account: AzureAccount) -> None:
        if not account.name:
            raise EmptyAccountNameError()
        if not account.application_id:
            raise EmptyApplicationIDError()
        if not account.directory_id:
            raise EmptyDirectoryIDError()
        if not account.subscription_id:
            raise EmptySubscriptionIDError()
        if not account.client_secret:
            raise EmptyClientSecretError()
