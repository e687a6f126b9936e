"""McpServer: routes JSON-RPC requests to the ``initialize``, ``tools/list``
and ``tools/call`` handlers.

The server owns a read-only :class:`~mcp_server.tools.ToolRegistry` and
keeps no other state, so every request is handled independently.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from opentelemetry import trace
from pydantic import ValidationError

from mcp_server.errors import (
    InternalError,
    InvalidParamsError,
    MethodNotFoundError,
    ProtocolError,
    ToolNotFoundError,
)
from mcp_server.protocol.models import JsonRpcRequest, JsonRpcResponse
from mcp_server.tools import ToolRegistry, default_registry
from mcp_server.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_REQUEST_ID,
    ATTR_TOOL_NAME,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

_Route = Callable[[JsonRpcRequest], dict[str, Any]]

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "mcp-server"
SERVER_VERSION = "0.1.0"


def initialize_result() -> dict[str, Any]:
    """The fixed ``initialize`` result document."""
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {"tools": {}},
        "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
    }


class McpServer:
    """Dispatches one request at a time to the matching handler.

    Usage::

        server = McpServer()
        response = server.handle_request(request)   # never raises
        line = server.handle_line('{"jsonrpc": "2.0", "id": 1, "method": "tools/list"}')

    Method names are matched exactly.  Every failure is returned as an
    in-band error object.
    """

    def __init__(self, registry: ToolRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry()
        self._routes: dict[str, _Route] = {
            "initialize": self._initialize,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
        }

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def handle_request(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Route *request* by method and build its response."""
        with _tracer.start_as_current_span("mcp.request") as span:
            span.set_attribute(ATTR_METHOD, request.method)
            if request.has_id and request.id is not None:
                span.set_attribute(ATTR_REQUEST_ID, str(request.id))

            try:
                route = self._routes.get(request.method)
                if route is None:
                    raise MethodNotFoundError
                result = route(request)
            except ProtocolError as exc:
                logger.debug(
                    "Request %r (%s) failed: %d %s",
                    request.id,
                    request.method,
                    exc.code,
                    exc.message,
                )
                span.set_attribute(ATTR_ERROR_CODE, int(exc.code))
                return JsonRpcResponse.reply_to(request, error=exc.to_error())

            return JsonRpcResponse.reply_to(request, result=result)

    def handle_line(self, line: str) -> str | None:
        """Parse one input line, dispatch it, and serialize the response.

        Returns ``None`` for blank lines and for lines that are not a valid
        request; the latter are reported on the ``mcp_server`` logger only.
        """
        line = line.strip()
        if not line:
            return None

        try:
            request = JsonRpcRequest.model_validate_json(line)
        except ValidationError as exc:
            logger.error("Failed to parse request: %s", exc)
            return None

        response = self.handle_request(request)
        return json.dumps(response.to_wire(), ensure_ascii=False, separators=(",", ":"))

    def list_tools(self) -> dict[str, Any]:
        """The ``tools/list`` result document."""
        return {"tools": [tool.to_wire() for tool in self._registry.list()]}

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _initialize(self, request: JsonRpcRequest) -> dict[str, Any]:
        # Client info in params is accepted as-is.
        return initialize_result()

    def _tools_list(self, request: JsonRpcRequest) -> dict[str, Any]:
        return self.list_tools()

    def _tools_call(self, request: JsonRpcRequest) -> dict[str, Any]:
        params = request.params
        if params is None:
            raise InvalidParamsError

        name = params.get("name") if isinstance(params, dict) else None
        if not isinstance(name, str):
            raise InvalidParamsError("Tool name required")

        trace.get_current_span().set_attribute(ATTR_TOOL_NAME, name)

        handler = self._registry.handler(name)
        if handler is None:
            raise ToolNotFoundError(name)

        arguments = params.get("arguments")
        if not isinstance(arguments, dict):
            arguments = {}

        try:
            result = handler(arguments)
        except ProtocolError:
            raise
        except Exception as exc:
            logger.exception("Tool %s raised", name)
            raise InternalError(data={"tool": name}) from exc
        return result.to_wire()
