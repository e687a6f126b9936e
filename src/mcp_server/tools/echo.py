"""The built-in ``echo`` tool."""

from __future__ import annotations

from typing import Any

from mcp_server.protocol.models import CallToolResult, ToolDescriptor

FALLBACK_TEXT = "No text provided"

ECHO_TOOL = ToolDescriptor(
    name="echo",
    description="Echo back the input text",
    input_schema={
        "type": "object",
        "properties": {
            "text": {
                "type": "string",
                "description": "Text to echo back",
            },
        },
        "required": ["text"],
    },
)


def echo(arguments: dict[str, Any]) -> CallToolResult:
    """Return ``"Echo: <text>"``.

    A missing or non-string ``text`` argument is replaced by
    :data:`FALLBACK_TEXT` rather than rejected.
    """
    text = arguments.get("text")
    if not isinstance(text, str):
        text = FALLBACK_TEXT
    return CallToolResult.from_text(f"Echo: {text}")
