"""FlightProvider protocol — the interface the ``getFlightInfo`` tool calls."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flightmcp.providers.serpapi.models import FlightOption


@runtime_checkable
class FlightProvider(Protocol):
    """Searches one-way flights for a route and date."""

    async def search_flights(self, origin: str, destination: str, date: str) -> list[FlightOption]:
        """Return normalized flight options, best matches first.

        Raises :class:`~flightmcp.providers.errors.FlightLookupError` on any
        failure.  An empty list means no flights were found.
        """
        ...
