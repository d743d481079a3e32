"""``getFlightInfo`` — one-way flight search backed by a FlightProvider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flightmcp.server.models import ToolDescriptor
from flightmcp.server.registry import Tool

if TYPE_CHECKING:
    from flightmcp.providers.provider import FlightProvider

GET_FLIGHT_INFO = "getFlightInfo"

FLIGHT_INFO_DESCRIPTOR = ToolDescriptor(
    name=GET_FLIGHT_INFO,
    description="Retrieve flight options via SerpAPI Google Flights",
    input_schema={
        "type": "object",
        "properties": {
            "from": {"type": "string", "description": "Origin IATA code"},
            "to": {"type": "string", "description": "Destination IATA code"},
            "date": {"type": "string", "format": "date", "description": "Date (YYYY-MM-DD)"},
        },
        "required": ["from", "to", "date"],
    },
)

FLIGHT_INFO_CALL_SHAPE = '{ from: "IATA", to: "IATA", date: "YYYY-MM-DD" }'


def build_flight_tool(provider: FlightProvider) -> Tool:
    """Bind the ``getFlightInfo`` descriptor to *provider*."""

    async def get_flight_info(arguments: dict[str, Any]) -> dict[str, Any]:
        options = await provider.search_flights(arguments["from"], arguments["to"], arguments["date"])
        return {"flights": [option.to_wire() for option in options]}

    return Tool(
        descriptor=FLIGHT_INFO_DESCRIPTOR,
        function=get_flight_info,
        call_shape=FLIGHT_INFO_CALL_SHAPE,
    )
