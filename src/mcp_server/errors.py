"""Error types for the server.

:class:`ProtocolError` subclasses are raised by request handlers and turned
into in-band JSON-RPC error objects by the dispatcher; they never escape
:meth:`~mcp_server.dispatcher.McpServer.handle_request`.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from mcp_server.protocol.models import JsonRpcError


class ErrorCode(IntEnum):
    """JSON-RPC 2.0 reserved error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base error for all failures reported back to the client."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    default_message = "Internal error"

    def __init__(self, message: str | None = None, *, data: Any = None) -> None:
        self.message = message or self.default_message
        self.data = data
        super().__init__(self.message)

    def to_error(self) -> JsonRpcError:
        """Convert to the wire-level error object."""
        return JsonRpcError(code=int(self.code), message=self.message, data=self.data)


class MethodNotFoundError(ProtocolError):
    """The request names a method the server does not implement."""

    code = ErrorCode.METHOD_NOT_FOUND
    default_message = "Method not found"


class InvalidParamsError(ProtocolError):
    """The request ``params`` are missing or malformed."""

    code = ErrorCode.INVALID_PARAMS
    default_message = "Invalid params"


class ToolNotFoundError(ProtocolError):
    """Requested tool does not exist in the registry."""

    code = ErrorCode.METHOD_NOT_FOUND
    default_message = "Tool not found"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__()


class InternalError(ProtocolError):
    """A tool handler failed unexpectedly."""


class ConfigError(Exception):
    """Raised when the settings file cannot be read or validated."""
