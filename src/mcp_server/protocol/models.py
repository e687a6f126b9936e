"""MCP models: JSON-RPC 2.0 messages and tool definitions.

Server-side view of the message format used by the Model Context Protocol
for the handshake (``initialize``), tool discovery (``tools/list``) and
execution (``tools/call``).

The request ``id`` is opaque correlation data.  Its *absence* is
significant: a request sent without an ``id`` gets a response without one,
while an explicit ``"id": null`` is echoed back as ``null``.  Pydantic's
``model_fields_set`` records which of the two happened.  Scalar ids keep
their JSON type; arrays and objects are rejected.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)

JSONRPC_VERSION = "2.0"

# Strict so a JSON `true` stays `true` instead of being coerced to 1.
RequestId = StrictBool | StrictInt | StrictFloat | StrictStr | None

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message as received from a client."""

    jsonrpc: str
    id: RequestId = None
    method: str
    params: Any = None

    @property
    def has_id(self) -> bool:
        """Whether the client sent an ``id`` member (``null`` counts)."""
        return "id" in self.model_fields_set

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Exactly one of ``result`` and ``error`` is set.
    """

    jsonrpc: str = JSONRPC_VERSION
    id: RequestId = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "response must carry exactly one of 'result' or 'error'"
            raise ValueError(msg)
        return self

    @classmethod
    def reply_to(
        cls,
        request: JsonRpcRequest,
        *,
        result: dict[str, Any] | None = None,
        error: JsonRpcError | None = None,
    ) -> JsonRpcResponse:
        """Build the response for *request*, mirroring its ``id`` verbatim."""
        fields: dict[str, Any] = {"result": result, "error": error}
        if request.has_id:
            fields["id"] = request.id
        return cls(**fields)

    @property
    def has_id(self) -> bool:
        return "id" in self.model_fields_set

    def to_wire(self) -> dict[str, Any]:
        """Return the dict that goes on the wire.

        ``id`` is present only when it was set; ``error.data`` only when
        it carries a value.
        """
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.has_id:
            data["id"] = self.id
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        return data


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A tool definition as advertised by ``tools/list``.

    The schema is opaque JSON and passed through verbatim.  It goes out as
    ``input_schema``; ``inputSchema`` is accepted on input as well.
    """

    model_config = {"frozen": True}

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("input_schema", "inputSchema"),
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump()


class TextContent(BaseModel):
    """A ``text`` content block in a tool result."""

    type: Literal["text"] = "text"
    text: str


class CallToolResult(BaseModel):
    """The ``result`` document of a successful ``tools/call``."""

    model_config = {"populate_by_name": True}

    content: list[TextContent] = Field(default_factory=lambda: list[TextContent]())
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_text(cls, text: str) -> CallToolResult:
        return cls(content=[TextContent(text=text)])

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {"content": [block.model_dump() for block in self.content]}
        if self.is_error:
            data["isError"] = True
        return data
