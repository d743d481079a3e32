"""Shared CLI output formatters."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table

from flightmcp.providers.serpapi.models import FlightOption  # noqa: TC001
from flightmcp.server.models import ToolDescriptor  # noqa: TC001

console = Console()
err_console = Console(stderr=True)


def print_tools_table(descriptors: list[ToolDescriptor]) -> None:
    """Pretty-print tool descriptors as a table."""
    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required")

    for descriptor in descriptors:
        table.add_row(
            descriptor.name,
            _truncate(descriptor.description),
            ", ".join(descriptor.required) or "-",
        )

    console.print(table)


def print_flights_table(options: list[FlightOption], *, title: str = "Flights") -> None:
    """Pretty-print normalized flight options, one row per option."""
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Price (USD)", justify="right", style="green")
    table.add_column("Duration", justify="right")
    table.add_column("Route")
    table.add_column("Flights", style="cyan")
    table.add_column("CO2 (kg)", justify="right")

    for index, option in enumerate(options, start=1):
        table.add_row(
            str(index),
            _fmt(option.price_usd),
            _fmt_minutes(option.total_duration_minutes),
            _route(option),
            ", ".join(seg.flight_number or "?" for seg in option.segments) or "-",
            _fmt(option.carbon_emissions_grams / 1000 if option.carbon_emissions_grams else None),
        )

    console.print(table)


def _route(option: FlightOption) -> str:
    if not option.segments:
        return "-"
    stops = [option.segments[0].from_ or "?"] + [seg.to or "?" for seg in option.segments]
    return " → ".join(stops)


def _fmt(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _fmt_minutes(value: int | float | None) -> str:
    if value is None:
        return "-"
    hours, minutes = divmod(int(value), 60)
    return f"{hours}h {minutes:02d}m"


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
