"""MethodDispatcher — routes a validated request to its handler.

Every call to :meth:`MethodDispatcher.dispatch` produces exactly one
response: protocol errors raised by a handler are converted into RPC error
responses carrying the request id.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from flightmcp import __version__
from flightmcp.server.errors import InternalError, JsonRpcProtocolError, MethodNotFoundError
from flightmcp.server.models import JsonRpcResponse
from flightmcp.utils.telemetry import ATTR_RPC_ERROR_CODE, ATTR_RPC_ID, ATTR_RPC_METHOD, get_tracer

if TYPE_CHECKING:
    from flightmcp.server.invoker import ToolInvoker
    from flightmcp.server.models import JsonRpcRequest
    from flightmcp.server.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

Handler = Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]

PROTOCOL_VERSION = "2025-03-26"
SERVER_NAME = "SerpAPI Flight Server"

METHOD_INITIALIZE = "initialize"
METHOD_LIST_TOOLS = "mcp/listTools"
METHOD_INVOKE_TOOL = "mcp/invokeTool"

# Older and newer MCP clients use different names for the same methods.
METHOD_ALIASES: dict[str, str] = {
    "tools/list": METHOD_LIST_TOOLS,
    "tools/call": METHOD_INVOKE_TOOL,
    "invokeTool": METHOD_INVOKE_TOOL,
}


class MethodDispatcher:
    """Maps method names (and their aliases) to async handlers.

    Usage::

        dispatcher = MethodDispatcher(registry, ToolInvoker(registry))
        response = await dispatcher.dispatch(request)
    """

    def __init__(
        self,
        registry: ToolRegistry,
        invoker: ToolInvoker,
        *,
        server_name: str = SERVER_NAME,
        server_version: str = __version__,
    ) -> None:
        self._registry = registry
        self._invoker = invoker
        self._server_info = {"name": server_name, "version": server_version}
        self._handlers: dict[str, Handler] = {
            METHOD_INITIALIZE: self._initialize,
            METHOD_LIST_TOOLS: self._list_tools,
            METHOD_INVOKE_TOOL: self._invoker.invoke,
        }

    def resolve(self, method: str) -> Handler | None:
        """Return the handler for *method*, following aliases."""
        return self._handlers.get(METHOD_ALIASES.get(method, method))

    def methods(self) -> list[str]:
        """All accepted method names, canonical first."""
        return [*self._handlers, *METHOD_ALIASES]

    async def dispatch(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Run the handler for *request* and wrap its outcome."""
        with _tracer.start_as_current_span(f"flightmcp.rpc.{request.method}") as span:
            span.set_attribute(ATTR_RPC_METHOD, request.method)
            span.set_attribute(ATTR_RPC_ID, str(request.id))
            try:
                handler = self.resolve(request.method)
                if handler is None:
                    raise MethodNotFoundError(request.method)
                result = await handler(request.params)
            except JsonRpcProtocolError as exc:
                logger.warning("Request %r rejected: %s", request.id, exc.message)
                span.set_attribute(ATTR_RPC_ERROR_CODE, exc.code)
                return JsonRpcResponse.failure(request.id, exc.code, exc.message)
            except Exception as exc:
                logger.exception("Unhandled error while handling %s", request.method)
                err = InternalError(str(exc))
                span.set_attribute(ATTR_RPC_ERROR_CODE, err.code)
                return JsonRpcResponse.failure(request.id, err.code, err.message)
            return JsonRpcResponse.success(request.id, result)

    async def _initialize(self, _params: dict[str, Any]) -> dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {"listChanged": False}},
            "serverInfo": dict(self._server_info),
        }

    async def _list_tools(self, _params: dict[str, Any]) -> dict[str, Any]:
        return {"tools": self._registry.descriptors()}
