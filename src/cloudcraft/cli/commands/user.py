"""User command implementation."""

import typer

from ...models import User
from ..output.display import display_user
from ..runner import run_async
from ..state import CLIState


def me(ctx: typer.Context) -> None:
    """Show the user owning the API key."""
    state: CLIState = ctx.obj

    async def run() -> User:
        async with state.create_client() as client:
            user, _ = await client.user.me()
            return user

    display_user(run_async(run))
