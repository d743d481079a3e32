"""Process wiring — provider, registry, dispatcher and stdio transport."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from flightmcp.providers.serpapi.client import SerpApiClient
from flightmcp.server.dispatcher import MethodDispatcher
from flightmcp.server.invoker import ToolInvoker
from flightmcp.server.registry import ToolRegistry
from flightmcp.server.session import StdioServer
from flightmcp.server.transport import StdioServerTransport
from flightmcp.tools.flights import build_flight_tool

if TYPE_CHECKING:
    from flightmcp.config import ServerSettings
    from flightmcp.providers.provider import FlightProvider
    from flightmcp.server.transport import ServerTransport

logger = logging.getLogger(__name__)


def build_server(provider: FlightProvider, transport: ServerTransport) -> StdioServer:
    """Assemble the request pipeline around *provider*."""
    registry = ToolRegistry([build_flight_tool(provider)])
    dispatcher = MethodDispatcher(registry, ToolInvoker(registry))
    return StdioServer(dispatcher, transport)


async def run_server(settings: ServerSettings, transport: ServerTransport | None = None) -> None:
    """Serve one session on *transport* (stdin/stdout by default) until EOF."""
    asyncio.get_running_loop().set_exception_handler(_log_loop_exception)

    client = SerpApiClient(
        settings.serpapi_api_key.get_secret_value(),
        base_url=settings.serpapi_base_url,
        timeout=settings.request_timeout,
    )
    async with client:
        server = build_server(client, transport or StdioServerTransport.from_process())
        logger.info("MCP Flight Server starting with SerpAPI integration...")
        await server.serve_forever()


def _log_loop_exception(_loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    """Log stray task errors instead of letting them end the session."""
    exc = context.get("exception")
    logger.error(
        "Unhandled exception in event loop: %s",
        context.get("message", "unknown"),
        exc_info=exc if isinstance(exc, BaseException) else None,
    )
