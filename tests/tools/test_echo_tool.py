"""Tests for the built-in echo tool."""

from __future__ import annotations

from mcp_server.tools.echo import ECHO_TOOL, FALLBACK_TEXT, echo


class TestEchoDescriptor:
    def test_name_and_description(self) -> None:
        assert ECHO_TOOL.name == "echo"
        assert ECHO_TOOL.description == "Echo back the input text"

    def test_schema(self) -> None:
        assert ECHO_TOOL.input_schema == {
            "type": "object",
            "properties": {
                "text": {"type": "string", "description": "Text to echo back"},
            },
            "required": ["text"],
        }


class TestEchoHandler:
    def test_echoes_text(self) -> None:
        result = echo({"text": "Hello, World!"})
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == "Echo: Hello, World!"
        assert result.is_error is False

    def test_missing_text(self) -> None:
        assert echo({}).content[0].text == f"Echo: {FALLBACK_TEXT}"

    def test_non_string_text(self) -> None:
        assert echo({"text": 42}).content[0].text == "Echo: No text provided"

    def test_empty_string_is_kept(self) -> None:
        assert echo({"text": ""}).content[0].text == "Echo: "
