"""Protocol-level error types.

Each error maps to a fixed JSON-RPC 2.0 error code.  These are raised for
requests that are not actionable (malformed envelope, unknown method or
tool, missing arguments) and are turned into RPC error responses.  Tool
execution failures are *not* protocol errors — see
:mod:`flightmcp.server.invoker`.
"""

from __future__ import annotations

from typing import Any

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class JsonRpcProtocolError(Exception):
    """Base error for all protocol-level failures."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str, *, request_id: Any = None) -> None:
        self.message = message
        self.request_id = request_id
        super().__init__(message)


class ParseError(JsonRpcProtocolError):
    """The line is not valid JSON."""

    code = PARSE_ERROR

    def __init__(self) -> None:
        super().__init__("Parse error: Invalid JSON")


class InvalidRequestError(JsonRpcProtocolError):
    """The JSON value is not a JSON-RPC 2.0 request."""

    code = INVALID_REQUEST

    def __init__(self, *, request_id: Any = None) -> None:
        super().__init__("Invalid Request", request_id=request_id)


class MethodNotFoundError(JsonRpcProtocolError):
    """No handler is registered for the requested method."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}")


class ToolNotFoundError(JsonRpcProtocolError):
    """Requested tool does not exist in the registry."""

    code = METHOD_NOT_FOUND

    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidParamsError(JsonRpcProtocolError):
    """Required tool arguments are missing."""

    code = INVALID_PARAMS

    def __init__(self, tool_name: str, missing: list[str], call_shape: str = "") -> None:
        self.tool_name = tool_name
        self.missing = missing
        msg = f"Missing required parameter(s): {', '.join(missing)} in tool '{tool_name}'."
        if call_shape:
            msg += f" Expected format: {call_shape}"
        super().__init__(msg)


class InternalError(JsonRpcProtocolError):
    """A handler failed unexpectedly."""

    code = INTERNAL_ERROR

    def __init__(self, detail: str = "") -> None:
        super().__init__("Internal error" + (f": {detail}" if detail else ""))
