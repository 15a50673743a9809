"""Blueprint command implementations."""

from pathlib import Path
from typing import Optional

import typer

from ...models import (
    DEFAULT_BUDGET_FORMAT,
    DEFAULT_CURRENCY,
    DEFAULT_HEIGHT,
    DEFAULT_IMAGE_FORMAT,
    DEFAULT_PERIOD,
    DEFAULT_WIDTH,
    Blueprint,
    BudgetExportParams,
    ImageExportParams,
)
from ..output.display import display_blueprints, display_written
from ..runner import run_async
from ..state import CLIState
from .files import write_export


def blueprints(ctx: typer.Context) -> None:
    """List the blueprints visible to the API key."""
    state: CLIState = ctx.obj

    async def run() -> list[Blueprint]:
        async with state.create_client() as client:
            result, _ = await client.blueprint.list()
            return result

    display_blueprints(run_async(run))


def export(
    ctx: typer.Context,
    blueprint_id: str = typer.Argument(..., help="ID of the blueprint"),
    output: Path = typer.Option(..., "-o", "--output", help="File to write"),
    export_format: str = typer.Option(
        DEFAULT_IMAGE_FORMAT, "--format", "-f", help="svg, png, pdf or mxGraph"
    ),
    width: int = typer.Option(DEFAULT_WIDTH, "--width", min=1),
    height: int = typer.Option(DEFAULT_HEIGHT, "--height", min=1),
    grid: bool = typer.Option(False, "--grid", help="Render the grid"),
    transparent: bool = typer.Option(
        False, "--transparent", help="Transparent background"
    ),
) -> None:
    """Render a blueprint to an image file.

    Examples:
        cloudcraft export 0f1a... -o diagram.png
        cloudcraft export 0f1a... -o diagram.svg --format svg
    """
    state: CLIState = ctx.obj
    params = ImageExportParams(
        width=width, height=height, grid=grid, transparent=transparent
    )

    async def run() -> int:
        async with state.create_client() as client:
            data, _ = await client.blueprint.export_image(
                blueprint_id, export_format, params
            )
        return await write_export(output, data)

    display_written(output, run_async(run))


def budget(
    ctx: typer.Context,
    blueprint_id: str = typer.Argument(..., help="ID of the blueprint"),
    output: Path = typer.Option(..., "-o", "--output", help="File to write"),
    export_format: str = typer.Option(
        DEFAULT_BUDGET_FORMAT, "--format", "-f", help="csv or xlsx"
    ),
    currency: str = typer.Option(DEFAULT_CURRENCY, "--currency"),
    period: str = typer.Option(
        DEFAULT_PERIOD, "--period", help="h (hourly), m (monthly) or y (yearly)"
    ),
    rate: Optional[str] = typer.Option(None, "--rate", help="Pricing rate"),
) -> None:
    """Export the budget of a blueprint.

    Examples:
        cloudcraft budget 0f1a... -o budget.csv
        cloudcraft budget 0f1a... -o budget.xlsx --format xlsx --currency EUR
    """
    state: CLIState = ctx.obj
    params = BudgetExportParams(currency=currency, period=period, rate=rate or "")

    async def run() -> int:
        async with state.create_client() as client:
            data, _ = await client.blueprint.export_budget(
                blueprint_id, export_format, params
            )
        return await write_export(output, data)

    display_written(output, run_async(run))
