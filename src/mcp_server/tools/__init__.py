"""Tool registry and built-in tools."""

from __future__ import annotations

from mcp_server.tools.echo import ECHO_TOOL, echo
from mcp_server.tools.registry import RegisteredTool, ToolHandler, ToolRegistry


def default_registry() -> ToolRegistry:
    """Build the registry served by default: just ``echo``."""
    registry = ToolRegistry()
    registry.register(ECHO_TOOL, echo)
    return registry


__all__ = [
    "ECHO_TOOL",
    "RegisteredTool",
    "ToolHandler",
    "ToolRegistry",
    "default_registry",
    "echo",
]
