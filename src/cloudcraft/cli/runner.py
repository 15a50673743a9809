"""Bridge between synchronous Typer commands and the async client."""

import asyncio
import typing as t

import typer

from ..domain.exceptions import CloudcraftError
from .output.display import display_error

T = t.TypeVar("T")


def run_async(main: t.Callable[[], t.Coroutine[t.Any, t.Any, T]]) -> T:
    """Run a coroutine function to completion.

    Raises:
        typer.Exit: With code 1 if the client raised a CloudcraftError
    """
    try:
        return asyncio.run(main())
    except CloudcraftError as e:
        display_error(e)
        raise typer.Exit(code=1)
