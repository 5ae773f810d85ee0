from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock


def make_stream(data: bytes = b"", *, eof: bool = True) -> asyncio.StreamReader:
    """Create a StreamReader pre-fed with *data*.

    Must be called from inside a running event loop. With ``eof=False`` reads
    block after *data* is consumed, which simulates a hung process.
    """
    reader = asyncio.StreamReader()
    if data:
        reader.feed_data(data)
    if eof:
        reader.feed_eof()
    return reader


def make_process(
    *,
    stdout: asyncio.StreamReader,
    stderr: asyncio.StreamReader,
    returncode: int | None = 0,
) -> MagicMock:
    """Create a mock subprocess whose pipes are real stream readers."""
    process = MagicMock()
    process.returncode = returncode
    process.pid = 12345
    process.stdout = stdout
    process.stderr = stderr
    process.wait = AsyncMock(return_value=returncode)
    process.terminate = MagicMock()
    process.kill = MagicMock()
    return process
