"""ToolInvoker — the ``mcp/invokeTool`` handler.

Protocol problems (unknown tool, missing arguments) are raised as
:class:`~flightmcp.server.errors.JsonRpcProtocolError` and become RPC error
responses.  Failures *inside* the tool are reported as a successful RPC
call whose envelope has ``isError: true``; callers inspect that flag
rather than an RPC error code.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from flightmcp.server.errors import InvalidParamsError, ToolNotFoundError
from flightmcp.server.models import ToolResultContent, ToolResultEnvelope
from flightmcp.server.registry import missing_arguments
from flightmcp.utils.telemetry import ATTR_TOOL_IS_ERROR, ATTR_TOOL_NAME, get_tracer

if TYPE_CHECKING:
    from flightmcp.server.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class ToolInvoker:
    """Validates an invocation against the registry and runs the tool."""

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    async def invoke(self, params: dict[str, Any]) -> dict[str, Any]:
        """Run the tool named in *params* and return the result envelope."""
        tool_name = params.get("toolName") or params.get("name")
        arguments = params.get("arguments")
        if not isinstance(arguments, dict):
            arguments = {}

        tool = self._registry.get(tool_name) if isinstance(tool_name, str) else None
        if tool is None:
            raise ToolNotFoundError(tool_name)

        missing = missing_arguments(tool.descriptor, arguments)
        if missing:
            raise InvalidParamsError(tool.name, missing, tool.call_shape)

        with _tracer.start_as_current_span("flightmcp.tool.invoke") as span:
            span.set_attribute(ATTR_TOOL_NAME, tool.name)
            try:
                payload = await tool.function(arguments)
            except Exception as exc:
                message = str(exc) or type(exc).__name__
                logger.error("Tool %s failed: %s", tool.name, message)
                span.set_attribute(ATTR_TOOL_IS_ERROR, True)
                return _envelope({"error": message}, is_error=True)

            span.set_attribute(ATTR_TOOL_IS_ERROR, False)
            return _envelope(payload, is_error=False)


def _envelope(payload: Any, *, is_error: bool) -> dict[str, Any]:
    envelope = ToolResultEnvelope(
        content=[ToolResultContent(data=json.dumps(payload, allow_nan=False))],
        is_error=is_error,
    )
    return envelope.to_wire()
