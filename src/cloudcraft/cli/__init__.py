"""Command line interface for the Cloudcraft API, built with Typer."""

from .app import create_cli_app

__all__ = ["cli", "create_cli_app"]


def cli() -> None:
    """Entry point of the ``cloudcraft`` console script."""
    create_cli_app()()
