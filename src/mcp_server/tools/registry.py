"""ToolRegistry: the static, insertion-ordered set of tools a server offers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mcp_server.protocol.models import CallToolResult, ToolDescriptor

ToolHandler = Callable[[dict[str, Any]], "CallToolResult"]


@dataclass(frozen=True)
class RegisteredTool:
    """A descriptor paired with the callable that implements it."""

    descriptor: ToolDescriptor
    handler: ToolHandler


class ToolRegistry:
    """Maps tool names to descriptors and handlers.

    Usage::

        registry = ToolRegistry()
        registry.register(ECHO_TOOL, echo)

        registry.list()                # descriptors, registration order
        registry.handler("echo")({"text": "hi"})

    Registering a name twice replaces the earlier entry in place.  The
    schema is never inspected.
    """

    def __init__(self) -> None:
        self._tools: dict[str, RegisteredTool] = {}

    def register(self, descriptor: ToolDescriptor, handler: ToolHandler) -> None:
        self._tools[descriptor.name] = RegisteredTool(descriptor, handler)

    def get(self, name: str) -> ToolDescriptor | None:
        entry = self._tools.get(name)
        return entry.descriptor if entry is not None else None

    def handler(self, name: str) -> ToolHandler | None:
        entry = self._tools.get(name)
        return entry.handler if entry is not None else None

    def list(self) -> list[ToolDescriptor]:
        """Return every descriptor in registration order."""
        return [entry.descriptor for entry in self._tools.values()]

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
