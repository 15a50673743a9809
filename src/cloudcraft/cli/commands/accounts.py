"""Accounts command implementation."""

from enum import Enum

import typer

from ...models import AWSAccount, AzureAccount
from ..output.display import display_accounts
from ..runner import run_async
from ..state import CLIState


class Provider(str, Enum):
    """Cloud providers with linked accounts."""

    AWS = "aws"
    AZURE = "azure"


def accounts(
    ctx: typer.Context,
    provider: Provider = typer.Argument(..., help="Cloud provider"),
) -> None:
    """List the cloud accounts linked with Cloudcraft.

    Examples:
        cloudcraft accounts aws
        cloudcraft accounts azure
    """
    state: CLIState = ctx.obj

    async def run() -> list[AWSAccount] | list[AzureAccount]:
        async with state.create_client() as client:
            match provider:
                case Provider.AWS:
                    aws_accounts, _ = await client.aws.list()
                    return aws_accounts
                case Provider.AZURE:
                    azure_accounts, _ = await client.azure.list()
                    return azure_accounts

    display_accounts(run_async(run))
