"""``flightmcp search`` — one-off flight lookup from the terminal."""

from __future__ import annotations

import asyncio
import json
import sys

import click

from flightmcp.cli_commands._output import console, err_console, print_flights_table


@click.command()
@click.argument("origin")
@click.argument("destination")
@click.argument("date")
@click.option("--json", "as_json", is_flag=True, help="Print the getFlightInfo payload as JSON.")
def search(origin: str, destination: str, date: str, as_json: bool) -> None:
    """Search one-way flights from ORIGIN to DESTINATION on DATE (YYYY-MM-DD)."""
    from flightmcp.config import ConfigurationError, load_settings
    from flightmcp.providers.errors import FlightLookupError
    from flightmcp.providers.serpapi.client import SerpApiClient
    from flightmcp.providers.serpapi.models import FlightOption

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        err_console.print(f"[red]FATAL:[/red] {exc}")
        sys.exit(1)

    async def _search() -> list[FlightOption]:
        async with SerpApiClient(
            settings.serpapi_api_key.get_secret_value(),
            base_url=settings.serpapi_base_url,
            timeout=settings.request_timeout,
        ) as client:
            return await client.search_flights(origin, destination, date)

    try:
        options = asyncio.run(_search())
    except FlightLookupError as exc:
        console.print(f"[red]Search error:[/red] {exc}")
        sys.exit(1)

    if as_json:
        console.print_json(json.dumps({"flights": [o.to_wire() for o in options]}))
        return

    if not options:
        console.print("[yellow]No flights found.[/yellow]")
        return

    print_flights_table(options, title=f"{origin} → {destination} on {date}")
