#!/usr/bin/env python3
"""
02_export_blueprint.py - Export a blueprint as an image and a budget

Demonstrates:
- Image export with rendering options
- Budget export in another currency
- Optimistic concurrency: update a blueprint only if it did not change

Note: Requires CLOUDCRAFT_API_KEY and an internet connection. Exports the
first blueprint of the account to ./exports
"""

import asyncio
import os
from pathlib import Path

from cloudcraft import BudgetExportParams, Client, ImageExportParams


async def main() -> None:
    output_dir = Path("./exports")
    output_dir.mkdir(exist_ok=True)

    async with Client() as client:
        blueprints, _ = await client.blueprint.list()
        if not blueprints:
            print("No blueprints to export")
            return

        blueprint_id = blueprints[0].id
        image, _ = await client.blueprint.export_image(
            blueprint_id, "svg", ImageExportParams(grid=True, width=1280, height=720)
        )
        (output_dir / f"{blueprint_id}.svg").write_bytes(image)
        print(f"Saved {len(image):,} bytes of SVG")

        budget, _ = await client.blueprint.export_budget(
            blueprint_id, "csv", BudgetExportParams(currency="EUR", period="y")
        )
        (output_dir / f"{blueprint_id}-budget.csv").write_bytes(budget)
        print(f"Saved {len(budget):,} bytes of budget")

        # The ETag from get() makes the update fail with 412 if someone else
        # saved the blueprint in the meantime
        blueprint, response = await client.blueprint.get(blueprint_id)
        blueprint.tags = sorted(set(blueprint.tags or []) | {"exported"})
        await client.blueprint.update(blueprint, etag=response.header("ETag") or "")
        print(f"Tagged {blueprint.name} as exported")


if __name__ == "__main__":
    if not os.environ.get("CLOUDCRAFT_API_KEY"):
        print("Set CLOUDCRAFT_API_KEY to run this example")
    else:
        asyncio.run(main())
