"""Tests for SerpApiClient with mocked httpx."""

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from flightmcp.providers.errors import FlightLookupError
from flightmcp.providers.provider import FlightProvider
from flightmcp.providers.serpapi.client import SerpApiClient


def _response(
    document: Any = None,
    *,
    status_code: int = 200,
    reason: str = "OK",
    json_error: Exception | None = None,
) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason_phrase = reason
    resp.is_success = 200 <= status_code < 300
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = document if document is not None else {}
    return resp


def _mock_httpx_client(response: MagicMock | None = None, error: Exception | None = None) -> AsyncMock:
    client = AsyncMock()
    if error is not None:
        client.get = AsyncMock(side_effect=error)
    else:
        client.get = AsyncMock(return_value=response or _response())
    client.aclose = AsyncMock()
    return client


PATCH_TARGET = "flightmcp.providers.serpapi.client.httpx.AsyncClient"


class TestSerpApiClientProtocol:
    def test_satisfies_flight_provider(self) -> None:
        assert isinstance(SerpApiClient("key"), FlightProvider)

    async def test_requires_context_manager(self) -> None:
        with pytest.raises(RuntimeError, match="async context manager"):
            await SerpApiClient("key").search_flights("JFK", "LAX", "2025-07-01")

    async def test_closes_http_client(self) -> None:
        mock = _mock_httpx_client()
        with patch(PATCH_TARGET, return_value=mock):
            async with SerpApiClient("key"):
                pass
        mock.aclose.assert_awaited_once()


class TestQuery:
    async def test_query_parameters(self) -> None:
        mock = _mock_httpx_client()
        with patch(PATCH_TARGET, return_value=mock) as cls:
            async with SerpApiClient("secret", base_url="https://example.test/") as client:
                await client.search_flights("JFK", "LAX", "2025-07-01")

        assert cls.call_args.kwargs["base_url"] == "https://example.test"
        assert cls.call_args.kwargs["timeout"] is None
        path = mock.get.call_args.args[0]
        params = mock.get.call_args.kwargs["params"]
        assert path == "/search"
        assert params == {
            "engine": "google_flights",
            "departure_id": "JFK",
            "arrival_id": "LAX",
            "outbound_date": "2025-07-01",
            "type": 2,
            "api_key": "secret",
        }

    async def test_configured_timeout(self) -> None:
        with patch(PATCH_TARGET, return_value=_mock_httpx_client()) as cls:
            async with SerpApiClient("key", timeout=12.5):
                pass
        assert cls.call_args.kwargs["timeout"] == 12.5


class TestResults:
    async def test_normalized_results(self) -> None:
        doc = {
            "best_flights": [{"price": 300, "flights": [{"flight_number": "AA 10"}]}],
            "other_flights": [{"price": 150}],
        }
        with patch(PATCH_TARGET, return_value=_mock_httpx_client(_response(doc))):
            async with SerpApiClient("key") as client:
                options = await client.search_flights("JFK", "LAX", "2025-07-01")
        assert [o.price_usd for o in options] == [300, 150]
        assert options[0].segments[0].flight_number == "AA 10"

    async def test_no_flights_is_empty_list(self) -> None:
        doc = {"best_flights": [], "other_flights": []}
        with patch(PATCH_TARGET, return_value=_mock_httpx_client(_response(doc))):
            async with SerpApiClient("key") as client:
                assert await client.search_flights("JFK", "LAX", "2025-07-01") == []


class TestFailures:
    async def test_http_status(self) -> None:
        resp = _response(status_code=401, reason="Unauthorized")
        with patch(PATCH_TARGET, return_value=_mock_httpx_client(resp)):
            async with SerpApiClient("key") as client:
                with pytest.raises(FlightLookupError) as info:
                    await client.search_flights("JFK", "LAX", "2025-07-01")
        assert str(info.value) == "Flight lookup failed: HTTP 401 - Unauthorized"

    async def test_network_error(self) -> None:
        mock = _mock_httpx_client(error=httpx.ConnectError("connection refused"))
        with patch(PATCH_TARGET, return_value=mock):
            async with SerpApiClient("key") as client:
                with pytest.raises(FlightLookupError, match="connection refused"):
                    await client.search_flights("JFK", "LAX", "2025-07-01")

    async def test_network_error_message_never_contains_key(self) -> None:
        mock = _mock_httpx_client(error=httpx.ConnectError("failed for ?api_key=topsecret"))
        with patch(PATCH_TARGET, return_value=mock):
            async with SerpApiClient("topsecret") as client:
                with pytest.raises(FlightLookupError) as info:
                    await client.search_flights("JFK", "LAX", "2025-07-01")
        assert "topsecret" not in str(info.value)

    async def test_invalid_json(self) -> None:
        resp = _response(json_error=json.JSONDecodeError("Expecting value", "<html>", 0))
        with patch(PATCH_TARGET, return_value=_mock_httpx_client(resp)):
            async with SerpApiClient("key") as client:
                with pytest.raises(FlightLookupError, match="invalid JSON"):
                    await client.search_flights("JFK", "LAX", "2025-07-01")

    async def test_failure_is_chained(self) -> None:
        error = httpx.ReadTimeout("timed out")
        with patch(PATCH_TARGET, return_value=_mock_httpx_client(error=error)):
            async with SerpApiClient("key") as client:
                with pytest.raises(FlightLookupError) as info:
                    await client.search_flights("JFK", "LAX", "2025-07-01")
        assert info.value.__cause__ is error
