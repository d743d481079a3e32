"""JSON-RPC dispatch and protocol-compliance layer."""

from flightmcp.server.dispatcher import METHOD_ALIASES, MethodDispatcher
from flightmcp.server.errors import (
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    JsonRpcProtocolError,
    MethodNotFoundError,
    ParseError,
    ToolNotFoundError,
)
from flightmcp.server.invoker import ToolInvoker
from flightmcp.server.models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolDescriptor,
    ToolResultContent,
    ToolResultEnvelope,
)
from flightmcp.server.parser import parse_request
from flightmcp.server.registry import Tool, ToolRegistry, missing_arguments
from flightmcp.server.session import StdioServer
from flightmcp.server.transport import ServerTransport, StdioServerTransport

__all__ = [
    "METHOD_ALIASES",
    "InternalError",
    "InvalidParamsError",
    "InvalidRequestError",
    "JsonRpcError",
    "JsonRpcProtocolError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MethodDispatcher",
    "MethodNotFoundError",
    "ParseError",
    "ServerTransport",
    "StdioServer",
    "StdioServerTransport",
    "Tool",
    "ToolDescriptor",
    "ToolInvoker",
    "ToolNotFoundError",
    "ToolRegistry",
    "ToolResultContent",
    "ToolResultEnvelope",
    "missing_arguments",
    "parse_request",
]
