"""Normalized flight models returned to tool callers.

The SerpAPI payload is flattened into a shape that is easy for an agent to
reason about.  Every field is optional: the upstream document is not
under our control.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FlightSegment(BaseModel):
    """One leg of an itinerary."""

    model_config = ConfigDict(populate_by_name=True)

    airline: str | None = None
    flight_number: str | None = None
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    departs: str | None = None
    arrives: str | None = None
    duration_minutes: int | float | None = None
    airplane: str | None = None
    travel_class: str | None = None
    extensions: list[str] = Field(default_factory=list)


class FlightOption(BaseModel):
    """A bookable option: price, totals, layovers and ordered segments."""

    price_usd: int | float | None = None
    total_duration_minutes: int | float | None = None
    carbon_emissions_grams: int | float | None = None
    layovers: list[dict[str, Any]] = Field(default_factory=list)
    segments: list[FlightSegment] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
