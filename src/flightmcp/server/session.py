"""StdioServer — the read → parse → dispatch → write loop."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from flightmcp.server.errors import INTERNAL_ERROR, InternalError, JsonRpcProtocolError
from flightmcp.server.models import JsonRpcResponse
from flightmcp.server.parser import parse_request

if TYPE_CHECKING:
    from flightmcp.server.dispatcher import MethodDispatcher
    from flightmcp.server.transport import ServerTransport

logger = logging.getLogger(__name__)


class StdioServer:
    """Single-session server over a line transport.

    Each request is handled to completion and its response written before
    the next line is read, so responses come out in request order and
    none is dropped or duplicated.  A line that trips an unexpected error
    is answered with -32603 and the session carries on.
    """

    def __init__(self, dispatcher: MethodDispatcher, transport: ServerTransport) -> None:
        self._dispatcher = dispatcher
        self._transport = transport

    async def handle_line(self, line: str) -> JsonRpcResponse | None:
        """Turn one input line into its response (``None`` for blank lines)."""
        if not line.strip():
            return None

        request_id: Any = None
        try:
            request = parse_request(line)
            request_id = request.id
            logger.debug("Received %s (id=%r)", request.method, request.id)
            return await self._dispatcher.dispatch(request)
        except JsonRpcProtocolError as exc:
            logger.warning("Rejected input line: %s", exc.message, extra={"payload": {"line": line[:200]}})
            return JsonRpcResponse.failure(exc.request_id, exc.code, exc.message)
        except Exception:
            logger.exception("Unexpected error handling input line", extra={"payload": {"line": line[:200]}})
            return JsonRpcResponse.failure(request_id, INTERNAL_ERROR, InternalError().message)

    async def serve_forever(self) -> None:
        """Serve until the input stream is closed."""
        while True:
            line = await self._transport.receive()
            if line is None:
                logger.info("Stdin closed - shutting down.")
                return
            response = await self.handle_line(line)
            if response is not None:
                await self._send(response)

    async def _send(self, response: JsonRpcResponse) -> None:
        try:
            await self._transport.send(response.to_wire())
        except (TypeError, ValueError) as exc:
            # Result not representable as strict JSON; the id always is.
            logger.error("Response for id=%r is not valid JSON: %s", response.id, exc)
            fallback = InternalError("response is not valid JSON")
            await self._transport.send(JsonRpcResponse.failure(response.id, fallback.code, fallback.message).to_wire())
