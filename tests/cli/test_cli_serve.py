"""Tests for ``flightmcp serve`` CLI command."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from flightmcp.cli import main


@pytest.fixture(autouse=True)
def _no_dotenv():
    with patch("flightmcp.config.load_dotenv"):
        yield


class TestServe:
    def test_missing_key_exits_nonzero_before_serving(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SERPAPI_KEY", raising=False)
        with patch("flightmcp.server.app.run_server", new=AsyncMock()) as run:
            result = CliRunner().invoke(main, ["serve"], input='{"jsonrpc":"2.0","id":1,"method":"initialize"}\n')

        assert result.exit_code == 1
        assert "SERPAPI_KEY" in result.output
        run.assert_not_awaited()

    def test_runs_server_with_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERPAPI_KEY", "abc")
        monkeypatch.setenv("FLIGHTMCP_REQUEST_TIMEOUT", "30")
        with patch("flightmcp.server.app.run_server", new=AsyncMock()) as run:
            result = CliRunner().invoke(main, ["serve", "--log-level", "debug"])

        assert result.exit_code == 0
        settings = run.await_args.args[0]
        assert settings.serpapi_api_key.get_secret_value() == "abc"
        assert settings.request_timeout == 30.0
        assert settings.log_level == "DEBUG"

    def test_log_file_option(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.setenv("SERPAPI_KEY", "abc")
        log_file = tmp_path / "logs" / "server.log"
        with patch("flightmcp.server.app.run_server", new=AsyncMock()) as run:
            result = CliRunner().invoke(main, ["serve", "--log-file", str(log_file)])

        assert result.exit_code == 0
        assert run.await_args.args[0].log_file == str(log_file)
        assert log_file.exists()

    def test_logging_configured_once_with_resolved_settings(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.setenv("SERPAPI_KEY", "abc")
        monkeypatch.setenv("FLIGHTMCP_LOG_LEVEL", "WARNING")
        log_file = str(tmp_path / "server.log")
        with (
            patch("flightmcp.server.app.run_server", new=AsyncMock()),
            patch("flightmcp.utils.diagnostics.configure_logging") as configure,
        ):
            result = CliRunner().invoke(main, ["serve", "--log-level", "debug", "--log-file", log_file])

        assert result.exit_code == 0
        configure.assert_called_once_with("DEBUG", log_file)

    def test_missing_key_skips_logging_setup(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SERPAPI_KEY", raising=False)
        with patch("flightmcp.utils.diagnostics.configure_logging") as configure:
            result = CliRunner().invoke(main, ["serve"])

        assert result.exit_code == 1
        configure.assert_not_called()

    def test_telemetry_without_sdk(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERPAPI_KEY", "abc")
        with (
            patch("flightmcp.server.app.run_server", new=AsyncMock()) as run,
            patch(
                "flightmcp.utils.telemetry.configure_telemetry",
                side_effect=ImportError("opentelemetry-sdk is required"),
            ),
        ):
            result = CliRunner().invoke(main, ["serve", "--telemetry"])

        assert result.exit_code == 1
        assert "Telemetry error" in result.output
        run.assert_not_awaited()
