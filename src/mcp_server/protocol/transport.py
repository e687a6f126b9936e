"""Line transport: newline-delimited JSON over a pair of text streams.

The transport only moves lines; parsing and dispatch belong to
:class:`~mcp_server.dispatcher.McpServer`.
"""

from __future__ import annotations

import io
import logging
import sys
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

if TYPE_CHECKING:
    from mcp_server.dispatcher import McpServer

logger = logging.getLogger(__name__)


@runtime_checkable
class LineTransport(Protocol):
    """Abstract line-oriented transport for JSON-RPC traffic."""

    def receive(self) -> str | None: ...
    def send(self, line: str) -> None: ...


class StreamTransport:
    """Reads requests from *reader* and writes responses to *writer*.

    One JSON document per line.  ``receive`` returns ``None`` at end of
    input; ``send`` appends the newline and flushes.
    """

    def __init__(self, reader: TextIO, writer: TextIO) -> None:
        self._reader = reader
        self._writer = writer

    def receive(self) -> str | None:
        """Read one line, or ``None`` once the reader is exhausted."""
        line = self._reader.readline()
        if not line:
            return None
        return line

    def send(self, line: str) -> None:
        """Write a line and flush it."""
        self._writer.write(line + "\n")
        self._writer.flush()


def stdio() -> StreamTransport:
    """Bind a transport to the process stdin/stdout, both switched to UTF-8."""
    for stream in (sys.stdin, sys.stdout):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(encoding="utf-8")
    return StreamTransport(sys.stdin, sys.stdout)


def serve(server: McpServer, transport: LineTransport) -> int:
    """Run the request loop until end of input.

    Each line is fully handled and its response written before the next
    line is read.  Lines that do not parse produce no output.  An
    ``OSError`` from the transport is logged and re-raised.

    Returns the number of responses written.
    """
    written = 0
    while True:
        try:
            line = transport.receive()
        except OSError:
            logger.exception("Failed to read line")
            raise
        if line is None:
            break

        reply = server.handle_line(line)
        if reply is None:
            continue

        try:
            transport.send(reply)
        except OSError:
            logger.exception("Failed to write response")
            raise
        written += 1

    logger.info("End of input after %d response(s)", written)
    return written
