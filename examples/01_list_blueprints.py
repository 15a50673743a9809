#!/usr/bin/env python3
"""
01_list_blueprints.py - Simplest possible API call

Demonstrates: Client usage with configuration read from the environment

Note: Requires CLOUDCRAFT_API_KEY and an internet connection
"""
import asyncio
import os

from cloudcraft import Client


async def main() -> None:
    """Print the current user and their blueprints."""
    async with Client() as client:
        user, _ = await client.user.me()
        print(f"Signed in as {user.name} <{user.email}>")

        blueprints, _ = await client.blueprint.list()
        for blueprint in blueprints:
            print(f"  {blueprint.id}  {blueprint.name}")
        print(f"{len(blueprints)} blueprint(s)")


if __name__ == "__main__":
    if not os.environ.get("CLOUDCRAFT_API_KEY"):
        print("Set CLOUDCRAFT_API_KEY to run this example")
    else:
        asyncio.run(main())
