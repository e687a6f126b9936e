"""Wire protocol: JSON-RPC envelope models and the line transport."""

from mcp_server.protocol.models import (
    JSONRPC_VERSION,
    CallToolResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    TextContent,
    ToolDescriptor,
)
from mcp_server.protocol.transport import LineTransport, StreamTransport, serve, stdio

__all__ = [
    "JSONRPC_VERSION",
    "CallToolResult",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "LineTransport",
    "StreamTransport",
    "TextContent",
    "ToolDescriptor",
    "serve",
    "stdio",
]
