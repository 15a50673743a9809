"""Tests for writing exported files."""

import pytest

from cloudcraft.cli.commands.files import write_export


class TestWriteExport:
    """Test write_export. Blockbuster is active, so any blocking call fails."""

    @pytest.mark.asyncio
    async def test_creates_missing_parent_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "out.png"

        written = await write_export(path, b"x")

        assert written == 1
        assert path.read_bytes() == b"x"

    @pytest.mark.asyncio
    async def test_existing_directory(self, tmp_path):
        path = tmp_path / "out.csv"

        written = await write_export(path, b"service,cost\n")

        assert written == 13
        assert path.read_bytes() == b"service,cost\n"
