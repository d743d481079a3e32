"""SerpApiClient — searches Google Flights through SerpAPI.

Satisfies the :class:`~flightmcp.providers.provider.FlightProvider`
protocol.  Network errors, non-2xx statuses and undecodable bodies are all
reported as :class:`~flightmcp.providers.errors.FlightLookupError` with a
short human-readable message; the API key never appears in it.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from flightmcp.providers.errors import FlightLookupError
from flightmcp.providers.serpapi.models import FlightOption
from flightmcp.providers.serpapi.normalize import normalize_flights
from flightmcp.utils.telemetry import (
    ATTR_FLIGHT_COUNT,
    ATTR_HTTP_STATUS,
    ATTR_ROUTE_DATE,
    ATTR_ROUTE_DESTINATION,
    ATTR_ROUTE_ORIGIN,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

DEFAULT_BASE_URL = "https://serpapi.com"
SEARCH_PATH = "/search"
ENGINE = "google_flights"
ONE_WAY = 2


class SerpApiClient:
    """Async client for the SerpAPI Google Flights engine.

    Usage::

        async with SerpApiClient(api_key) as client:
            options = await client.search_flights("JFK", "LAX", "2025-07-01")

    *timeout* is ``None`` by default: a slow provider stalls only the
    request waiting on it.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> SerpApiClient:
        self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "SerpApiClient must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    def build_params(self, origin: str, destination: str, date: str) -> dict[str, Any]:
        """Query parameters for a one-way search."""
        return {
            "engine": ENGINE,
            "departure_id": origin,
            "arrival_id": destination,
            "outbound_date": date,
            "type": ONE_WAY,
            "api_key": self._api_key,
        }

    async def search_flights(self, origin: str, destination: str, date: str) -> list[FlightOption]:
        """Query SerpAPI and return normalized flight options."""
        params = self.build_params(origin, destination, date)
        route = {"from": origin, "to": destination, "date": date}

        with _tracer.start_as_current_span("flightmcp.provider.search") as span:
            span.set_attribute(ATTR_ROUTE_ORIGIN, str(origin))
            span.set_attribute(ATTR_ROUTE_DESTINATION, str(destination))
            span.set_attribute(ATTR_ROUTE_DATE, str(date))
            logger.info(
                "Flight search request",
                extra={"payload": {"url": self._base_url + SEARCH_PATH, "params": _redacted(params)}},
            )

            try:
                response = await self._http().get(SEARCH_PATH, params=params)
            except httpx.HTTPError as exc:
                detail = self._scrub(str(exc) or type(exc).__name__)
                logger.error("Flight API fetch failed", extra={"payload": {"error": detail}})
                raise FlightLookupError(detail) from exc

            span.set_attribute(ATTR_HTTP_STATUS, response.status_code)
            if not response.is_success:
                detail = f"HTTP {response.status_code} - {response.reason_phrase}"
                logger.error("Flight API fetch failed", extra={"payload": {"error": detail}})
                raise FlightLookupError(detail)

            try:
                document = response.json()
            except ValueError as exc:
                logger.error("Flight API returned invalid JSON", extra={"payload": {"error": str(exc)}})
                raise FlightLookupError(f"invalid JSON in response: {exc}") from exc

            options = normalize_flights(document)
            span.set_attribute(ATTR_FLIGHT_COUNT, len(options))

        if not options:
            logger.warning("No flights returned from API", extra={"payload": route})
        else:
            logger.info("Flight results: %d option(s)", len(options), extra={"payload": route})
        return options

    def _scrub(self, text: str) -> str:
        return text.replace(self._api_key, "***") if self._api_key else text


def _redacted(params: dict[str, Any]) -> dict[str, Any]:
    return {key: ("***" if key == "api_key" else value) for key, value in params.items()}
