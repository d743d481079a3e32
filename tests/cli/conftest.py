"""Shared fixtures for CLI tests."""

from __future__ import annotations

import pytest

from flightmcp.cli_commands import _output


@pytest.fixture(autouse=True)
def _wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rich tables on one line regardless of the runner's terminal."""
    monkeypatch.setattr(_output.console, "width", 200)
