"""Flatten a SerpAPI Google Flights document into :class:`FlightOption` s.

Every field read from the provider is treated as optional: missing or
mistyped values become ``None`` (or an empty list), never an exception.
"""

from __future__ import annotations

import math
from typing import Any

from flightmcp.providers.serpapi.models import FlightOption, FlightSegment


def normalize_flights(document: Any) -> list[FlightOption]:
    """Return ``best_flights`` followed by ``other_flights``, normalized.

    Order of options and of legs within each option is preserved.
    Entries that are not JSON objects are skipped.
    """
    doc = _as_dict(document)
    candidates = _as_list(doc.get("best_flights")) + _as_list(doc.get("other_flights"))
    return [_option(raw) for raw in candidates if isinstance(raw, dict)]


def _option(raw: dict[str, Any]) -> FlightOption:
    return FlightOption(
        price_usd=_number(raw.get("price")),
        total_duration_minutes=_number(raw.get("total_duration")),
        carbon_emissions_grams=_number(_as_dict(raw.get("carbon_emissions")).get("this_flight")),
        layovers=[item for item in _as_list(raw.get("layovers")) if isinstance(item, dict)],
        segments=[_segment(leg) for leg in _as_list(raw.get("flights")) if isinstance(leg, dict)],
    )


def _segment(leg: dict[str, Any]) -> FlightSegment:
    departure = _as_dict(leg.get("departure_airport"))
    arrival = _as_dict(leg.get("arrival_airport"))
    return FlightSegment(
        airline=_text(leg.get("airline")),
        flight_number=_text(leg.get("flight_number")),
        from_=_text(departure.get("name")),
        to=_text(arrival.get("name")),
        departs=_text(departure.get("time")),
        arrives=_text(arrival.get("time")),
        duration_minutes=_number(leg.get("duration")),
        airplane=_text(leg.get("airplane")),
        travel_class=_text(leg.get("travel_class")),
        extensions=[text for item in _as_list(leg.get("extensions")) if (text := _text(item)) is not None],
    )


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _number(value: Any) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None
