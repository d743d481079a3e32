"""SerpAPI (Google Flights engine) provider."""

from flightmcp.providers.serpapi.client import SerpApiClient
from flightmcp.providers.serpapi.models import FlightOption, FlightSegment
from flightmcp.providers.serpapi.normalize import normalize_flights

__all__ = [
    "FlightOption",
    "FlightSegment",
    "SerpApiClient",
    "normalize_flights",
]
