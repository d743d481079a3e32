"""Tests for CLI output helpers."""

from __future__ import annotations

from flightmcp.cli_commands._output import _fmt, _fmt_minutes, _route, _truncate
from flightmcp.providers.serpapi.models import FlightOption, FlightSegment


class TestFormatting:
    def test_minutes(self) -> None:
        assert _fmt_minutes(185) == "3h 05m"
        assert _fmt_minutes(None) == "-"

    def test_values(self) -> None:
        assert _fmt(None) == "-"
        assert _fmt(98.0) == "98"
        assert _fmt(321) == "321"

    def test_route(self) -> None:
        option = FlightOption(
            segments=[
                FlightSegment(from_="Newark", to="Chicago"),
                FlightSegment(from_="Chicago", to=None),
            ]
        )
        assert _route(option) == "Newark → Chicago → ?"
        assert _route(FlightOption()) == "-"

    def test_truncate(self) -> None:
        assert _truncate("short") == "short"
        assert _truncate("x" * 100, max_len=10) == "xxxxxxx..."
