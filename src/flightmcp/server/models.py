"""JSON-RPC 2.0 envelope and MCP tool payload models.

Implements the message format spoken over stdio: requests, success and
error responses, tool descriptors returned by ``mcp/listTools`` and the
``tool_result`` envelope returned by ``mcp/invokeTool``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

JSONRPC_VERSION = "2.0"

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A validated JSON-RPC 2.0 request.

    ``id`` is kept verbatim (any JSON value) so it can be echoed back.
    """

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    method: str
    id: Any = None
    params: dict[str, Any] = {}


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response: exactly one of ``result`` or ``error``."""

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "response must carry exactly one of 'result' or 'error'"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, request_id: Any, result: dict[str, Any]) -> JsonRpcResponse:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: Any, code: int, message: str) -> JsonRpcResponse:
        return cls(id=request_id, error=JsonRpcError(code=code, message=message))

    def to_wire(self) -> dict[str, Any]:
        """Return the dict written to the stream (``id`` is always present)."""
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result
        return payload


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``mcp/listTools``."""

    model_config = {"populate_by_name": True, "frozen": True}

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ToolResultContent(BaseModel):
    """One content item of a tool result; ``data`` is a JSON string."""

    type: Literal["tool_result"] = "tool_result"
    data: str


class ToolResultEnvelope(BaseModel):
    """The ``result`` of an ``mcp/invokeTool`` call."""

    model_config = {"populate_by_name": True}

    content: list[ToolResultContent]
    is_error: bool = Field(default=False, alias="isError")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
