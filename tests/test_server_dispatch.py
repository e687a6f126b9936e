"""Tests for McpServer request dispatch."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest

from mcp_server.dispatcher import McpServer
from mcp_server.errors import InvalidParamsError
from mcp_server.protocol.models import CallToolResult, JsonRpcRequest, ToolDescriptor
from mcp_server.tools import ToolRegistry


def _request(method: str, **fields: Any) -> JsonRpcRequest:
    return JsonRpcRequest.model_validate({"jsonrpc": "2.0", "method": method, **fields})


def _call(server: McpServer, params: Any, request_id: Any = 1) -> dict[str, Any]:
    return server.handle_request(_request("tools/call", id=request_id, params=params)).to_wire()


class TestInitialize:
    def test_fixed_document(self, server: McpServer) -> None:
        resp = server.handle_request(
            _request("initialize", id=1, params={"clientInfo": {"name": "test", "version": "1.0"}})
        )
        assert resp.error is None
        assert resp.to_wire() == {
            "jsonrpc": "2.0",
            "id": 1,
            "result": {
                "protocolVersion": "2024-11-05",
                "capabilities": {"tools": {}},
                "serverInfo": {"name": "mcp-server", "version": "0.1.0"},
            },
        }

    @pytest.mark.parametrize("params", [None, {}, [1, 2], "junk", {"protocolVersion": "1999-01-01"}])
    def test_params_ignored(self, server: McpServer, params: Any) -> None:
        resp = server.handle_request(_request("initialize", id=1, params=params))
        assert resp.result is not None
        assert resp.result["protocolVersion"] == "2024-11-05"

    def test_result_is_a_fresh_copy(self, server: McpServer) -> None:
        first = server.handle_request(_request("initialize", id=1)).result
        assert first is not None
        first["serverInfo"]["name"] = "tampered"
        second = server.handle_request(_request("initialize", id=2)).result
        assert second is not None
        assert second["serverInfo"] == {"name": "mcp-server", "version": "0.1.0"}


class TestToolsList:
    def test_lists_echo(self, server: McpServer) -> None:
        resp = server.handle_request(_request("tools/list", id=2))
        assert resp.id == 2
        assert resp.error is None
        assert resp.result == {
            "tools": [
                {
                    "name": "echo",
                    "description": "Echo back the input text",
                    "input_schema": {
                        "type": "object",
                        "properties": {
                            "text": {"type": "string", "description": "Text to echo back"},
                        },
                        "required": ["text"],
                    },
                }
            ]
        }

    def test_registry_order(self) -> None:
        registry = ToolRegistry()
        for name in ("b", "a"):
            registry.register(ToolDescriptor(name=name), lambda args: CallToolResult())
        resp = McpServer(registry=registry).handle_request(_request("tools/list", id=1))
        assert resp.result is not None
        assert [t["name"] for t in resp.result["tools"]] == ["b", "a"]


class TestToolsCall:
    def test_echo(self, server: McpServer) -> None:
        wire = _call(server, {"name": "echo", "arguments": {"text": "Hello, World!"}}, 3)
        assert wire == {
            "jsonrpc": "2.0",
            "id": 3,
            "result": {"content": [{"type": "text", "text": "Echo: Hello, World!"}]},
        }

    def test_echo_without_text(self, server: McpServer) -> None:
        wire = _call(server, {"name": "echo", "arguments": {}}, 4)
        assert wire["result"]["content"][0]["text"] == "Echo: No text provided"

    @pytest.mark.parametrize("arguments", [None, "text", [1], {"text": 5}])
    def test_echo_odd_arguments_fall_back(self, server: McpServer, arguments: Any) -> None:
        params: dict[str, Any] = {"name": "echo"}
        if arguments is not None:
            params["arguments"] = arguments
        wire = _call(server, params)
        assert wire["result"]["content"][0]["text"] == "Echo: No text provided"

    def test_missing_params(self, server: McpServer) -> None:
        resp = server.handle_request(_request("tools/call", id=7))
        assert resp.result is None
        assert resp.error is not None
        assert resp.error.code == -32602
        assert resp.error.message == "Invalid params"

    def test_null_params(self, server: McpServer) -> None:
        wire = _call(server, None, 7)
        assert wire["error"] == {"code": -32602, "message": "Invalid params"}

    @pytest.mark.parametrize(
        "params",
        [{"arguments": {"text": "test"}}, {"name": 5}, {"name": None}, [1, 2], "echo"],
    )
    def test_tool_name_required(self, server: McpServer, params: Any) -> None:
        wire = _call(server, params, 8)
        assert wire["id"] == 8
        assert wire["error"] == {"code": -32602, "message": "Tool name required"}

    def test_unknown_tool(self, server: McpServer) -> None:
        wire = _call(server, {"name": "unknown_tool", "arguments": {}}, 6)
        assert wire["error"] == {"code": -32601, "message": "Tool not found"}
        assert "result" not in wire

    def test_tool_name_is_case_sensitive(self, server: McpServer) -> None:
        wire = _call(server, {"name": "Echo", "arguments": {"text": "x"}})
        assert wire["error"]["message"] == "Tool not found"

    def test_routes_through_registry(self) -> None:
        registry = ToolRegistry()
        registry.register(
            ToolDescriptor(name="upper"),
            lambda args: CallToolResult.from_text(str(args.get("text", "")).upper()),
        )
        server = McpServer(registry=registry)

        wire = _call(server, {"name": "upper", "arguments": {"text": "abc"}})
        assert wire["result"]["content"][0]["text"] == "ABC"

        # echo is not registered here, so it is not callable either
        wire = _call(server, {"name": "echo", "arguments": {"text": "abc"}})
        assert wire["error"]["message"] == "Tool not found"

    def test_handler_failure_becomes_internal_error(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        def boom(arguments: dict[str, Any]) -> CallToolResult:
            raise RuntimeError("kaput")

        registry = ToolRegistry()
        registry.register(ToolDescriptor(name="boom"), boom)
        server = McpServer(registry=registry)

        with caplog.at_level(logging.ERROR, logger="mcp_server"):
            wire = _call(server, {"name": "boom"})

        assert wire["error"] == {
            "code": -32603,
            "message": "Internal error",
            "data": {"tool": "boom"},
        }
        assert any("boom" in r.getMessage() for r in caplog.records)

    def test_handler_protocol_error_passes_through(self) -> None:
        def picky(arguments: dict[str, Any]) -> CallToolResult:
            raise InvalidParamsError("text must be short")

        registry = ToolRegistry()
        registry.register(ToolDescriptor(name="picky"), picky)
        wire = _call(McpServer(registry=registry), {"name": "picky"})
        assert wire["error"] == {"code": -32602, "message": "text must be short"}


class TestUnknownMethod:
    @pytest.mark.parametrize("method", ["unknown/method", "Initialize", "tools/List", "", "ping"])
    def test_method_not_found(self, server: McpServer, method: str) -> None:
        resp = server.handle_request(_request(method, id=5))
        assert resp.id == 5
        assert resp.result is None
        assert resp.error is not None
        assert resp.error.code == -32601
        assert resp.error.message == "Method not found"


class TestIdMirroring:
    @pytest.mark.parametrize("method", ["initialize", "tools/list", "tools/call", "nope"])
    @pytest.mark.parametrize("request_id", [1, "abc", 0, None, 1.5, True])
    def test_id_echoed(self, server: McpServer, method: str, request_id: Any) -> None:
        wire = server.handle_request(_request(method, id=request_id)).to_wire()
        assert "id" in wire
        assert wire["id"] == request_id
        assert ("result" in wire) != ("error" in wire)

    @pytest.mark.parametrize("method", ["initialize", "tools/list", "tools/call", "nope"])
    def test_absent_id_stays_absent(self, server: McpServer, method: str) -> None:
        wire = server.handle_request(_request(method)).to_wire()
        assert "id" not in wire
        assert ("result" in wire) != ("error" in wire)


class TestHandleLine:
    def test_serializes_compact_json(self, server: McpServer) -> None:
        line = server.handle_line('{"jsonrpc": "2.0", "id": 1, "method": "tools/list"}\n')
        assert line is not None
        assert "\n" not in line
        assert json.loads(line)["result"]["tools"][0]["name"] == "echo"
        assert ", " not in line

    def test_blank_line(self, server: McpServer) -> None:
        assert server.handle_line("   \n") is None

    @pytest.mark.parametrize(
        "line",
        ["{not json", "[1, 2]", '{"jsonrpc": "2.0", "id": 1}', '{"method": "tools/list"}'],
    )
    def test_invalid_request_is_dropped(
        self, server: McpServer, line: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="mcp_server"):
            assert server.handle_line(line) is None
        assert any("Failed to parse request" in r.getMessage() for r in caplog.records)

    def test_unicode_passes_through(self, server: McpServer) -> None:
        line = server.handle_line(
            json.dumps(
                {
                    "jsonrpc": "2.0",
                    "id": 1,
                    "method": "tools/call",
                    "params": {"name": "echo", "arguments": {"text": "héllo ✓"}},
                }
            )
        )
        assert line is not None
        assert "héllo ✓" in line


class TestIdTypes:
    def test_boolean_id_echoed_unchanged(self, server: McpServer) -> None:
        line = server.handle_line('{"jsonrpc":"2.0","id":true,"method":"tools/list"}')
        assert line is not None
        assert '"id":true' in line
        assert json.loads(line)["id"] is True

    def test_integer_id_not_turned_into_bool(self, server: McpServer) -> None:
        line = server.handle_line('{"jsonrpc":"2.0","id":1,"method":"tools/list"}')
        assert line is not None
        response = json.loads(line)
        assert response["id"] == 1
        assert response["id"] is not True

    def test_numeric_string_id_stays_string(self, server: McpServer) -> None:
        line = server.handle_line('{"jsonrpc":"2.0","id":"7","method":"initialize"}')
        assert line is not None
        assert json.loads(line)["id"] == "7"

    @pytest.mark.parametrize("raw_id", ["[1]", '{"a": 1}'])
    def test_structured_id_is_a_parse_failure(
        self, server: McpServer, raw_id: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="mcp_server"):
            line = server.handle_line(f'{{"jsonrpc":"2.0","id":{raw_id},"method":"initialize"}}')
        assert line is None
        assert any("Failed to parse request" in r.getMessage() for r in caplog.records)
