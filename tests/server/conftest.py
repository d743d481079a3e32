"""Shared helpers for server tests."""

from __future__ import annotations

import io
import json
from typing import Any

from flightmcp.providers.errors import FlightLookupError
from flightmcp.providers.serpapi.models import FlightOption, FlightSegment


class FakeFlightProvider:
    """In-memory FlightProvider returning canned options or raising."""

    def __init__(self, options: list[FlightOption] | None = None, error: Exception | None = None) -> None:
        self.options = options or []
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    async def search_flights(self, origin: str, destination: str, date: str) -> list[FlightOption]:
        self.calls.append((origin, destination, date))
        if self.error is not None:
            raise self.error
        return self.options


def sample_option(price: int = 199) -> FlightOption:
    return FlightOption(
        price_usd=price,
        total_duration_minutes=330,
        segments=[FlightSegment(airline="Delta", flight_number="DL 1", from_="JFK", to="LAX")],
    )


def lookup_failure() -> FlightLookupError:
    return FlightLookupError("HTTP 503 - Service Unavailable")


def lines(*messages: Any) -> io.StringIO:
    """Build an input stream; dicts are JSON-encoded, strings sent raw."""
    return io.StringIO(
        "".join((m if isinstance(m, str) else json.dumps(m)) + "\n" for m in messages)
    )


def responses(out: io.StringIO) -> list[dict[str, Any]]:
    return [json.loads(line) for line in out.getvalue().splitlines()]
