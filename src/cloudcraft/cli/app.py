"""CLI application factory."""

from typing import Optional

import typer

from ..app import create_app
from ..config.settings import LogLevel, Settings, build_settings
from .commands import accounts, blueprints, budget, export, me
from .state import CLIState, ClientFactory


def create_cli_app(
    settings: Settings | None = None,
    client_factory: ClientFactory | None = None,
) -> typer.Typer:
    """Create CLI application with optional overrides.

    Args:
        settings: Optional Settings override for testing
        client_factory: Optional factory building a Client from a
            ClientConfig, for testing

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="cloudcraft",
        help="Cloudcraft - Query and export diagrams from the Cloudcraft API",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        timeout: Optional[float] = typer.Option(
            None,
            "--timeout",
            "-t",
            help="Time limit for each HTTP attempt, in seconds",
            min=0,
        ),
        max_retries: Optional[int] = typer.Option(
            None,
            "--max-retries",
            "-r",
            help="Retries after the first attempt",
            min=0,
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if settings is not None:
            resolved_settings = settings
        else:
            resolved_settings = build_settings(
                log_level=LogLevel.DEBUG if verbose else None,
            )

        create_app(resolved_settings)
        ctx.obj = CLIState(
            resolved_settings,
            client_factory=client_factory,
            timeout=timeout,
            max_retries=max_retries,
        )

    app.command()(me)
    app.command()(blueprints)
    app.command()(accounts)
    app.command()(export)
    app.command()(budget)

    return app
