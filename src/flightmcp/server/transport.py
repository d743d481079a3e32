"""Stdio transport — newline-delimited JSON over text streams.

Mirror image of a client-side stdio transport: ``receive`` reads one line
of input, ``send`` writes one JSON response per line and flushes.
"""

from __future__ import annotations

import asyncio
import io
import json
import sys
from typing import Any, Protocol, TextIO, runtime_checkable


@runtime_checkable
class ServerTransport(Protocol):
    """Abstract line transport used by :class:`~flightmcp.server.session.StdioServer`."""

    async def receive(self) -> str | None: ...
    async def send(self, data: dict[str, Any]) -> None: ...


class StdioServerTransport:
    """Reads requests from *reader* and writes responses to *writer*.

    The blocking ``readline`` runs in a worker thread so the event loop
    stays free while waiting for input.
    """

    def __init__(self, reader: TextIO, writer: TextIO) -> None:
        self._reader = reader
        self._writer = writer

    @classmethod
    def from_process(cls) -> StdioServerTransport:
        """Wrap the process stdin/stdout as UTF-8 text streams.

        Undecodable input bytes are replaced so they surface as parse
        errors instead of killing the session.
        """
        reader = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="replace")
        writer = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", line_buffering=True)
        return cls(reader, writer)

    async def receive(self) -> str | None:
        """Return the next line without its terminator, or ``None`` at EOF."""
        line = await asyncio.to_thread(self._reader.readline)
        if line == "":
            return None
        return line.rstrip("\r\n")

    async def send(self, data: dict[str, Any]) -> None:
        """Write a single JSON line and flush it.

        Raises ``ValueError`` (before writing anything) if *data* holds a
        non-finite float, which strict JSON cannot represent.
        """
        self._writer.write(json.dumps(data, allow_nan=False) + "\n")
        self._writer.flush()
