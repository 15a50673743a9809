"""Writing exported files."""

from pathlib import Path

import aiofiles
import aiofiles.os


async def write_export(path: Path, data: bytes) -> int:
    """Write exported bytes to path, creating parent directories.

    Returns:
        Number of bytes written
    """
    # Async to avoid blocking the event loop
    await aiofiles.os.makedirs(path.parent, exist_ok=True)
    async with aiofiles.open(path, "wb") as f:
        await f.write(data)
    return len(data)
