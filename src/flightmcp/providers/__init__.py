"""Flight data providers."""

from flightmcp.providers.errors import FlightLookupError, ProviderError
from flightmcp.providers.provider import FlightProvider

__all__ = [
    "FlightLookupError",
    "FlightProvider",
    "ProviderError",
]
