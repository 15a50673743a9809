"""Display functions for CLI output."""

from pathlib import Path

import typer

from ...domain.exceptions import CloudcraftError, RequestFailedError
from ...models import AWSAccount, AzureAccount, Blueprint, User


def display_user(user: User) -> None:
    typer.echo(f"{user.name or '-'} <{user.email or '-'}>")
    typer.echo(f"  ID: {user.id}")
    if user.accessed_at:
        typer.echo(f"  Last access: {user.accessed_at.isoformat()}")


def display_blueprints(blueprints: list[Blueprint]) -> None:
    """Display one line per blueprint: ID, then name.

    Args:
        blueprints: Blueprints to list
    """
    if not blueprints:
        typer.secho("No blueprints found", fg=typer.colors.YELLOW)
        return

    for blueprint in blueprints:
        typer.echo(f"{blueprint.id}  {blueprint.name or ''}")


def display_accounts(accounts: list[AWSAccount] | list[AzureAccount]) -> None:
    if not accounts:
        typer.secho("No accounts found", fg=typer.colors.YELLOW)
        return

    for account in accounts:
        typer.echo(f"{account.id}  {account.name or ''}")


def display_written(path: Path, size: int) -> None:
    """Display confirmation that an export was saved.

    Args:
        path: File the export was written to
        size: Number of bytes written
    """
    typer.secho(f"✓ Saved {size} bytes to {path}", fg=typer.colors.GREEN)


def display_error(error: CloudcraftError) -> None:
    """Display a client error with its category.

    Args:
        error: Error raised by the client
    """
    typer.secho(f"✗ {error.kind.value}: {error}", fg=typer.colors.RED)
    if isinstance(error, RequestFailedError) and error.status == 401:
        typer.secho("  Check CLOUDCRAFT_API_KEY", fg=typer.colors.RED)
