"""``flightmcp serve`` — run the MCP stdio server until stdin closes."""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from flightmcp.cli_commands._output import err_console

logger = logging.getLogger(__name__)


@click.command()
@click.option("--log-file", default=None, help="Also append diagnostics to this file.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Diagnostics level (defaults to FLIGHTMCP_LOG_LEVEL or INFO).",
)
@click.option("--telemetry", is_flag=True, help="Export trace spans to stderr.")
@click.option("--otlp-endpoint", default=None, help="Export trace spans via OTLP/gRPC.")
def serve(
    log_file: str | None,
    log_level: str | None,
    telemetry: bool,
    otlp_endpoint: str | None,
) -> None:
    """Serve JSON-RPC requests on stdin/stdout."""
    from flightmcp.config import ENV_API_KEY, ConfigurationError, load_settings
    from flightmcp.server.app import run_server
    from flightmcp.utils.diagnostics import configure_logging

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        err_console.print(f"[red]FATAL:[/red] {exc}")
        sys.exit(1)

    overrides = {
        key: value
        for key, value in {"log_file": log_file, "log_level": log_level and log_level.upper()}.items()
        if value
    }
    settings = settings.model_copy(update=overrides)
    configure_logging(settings.log_level, settings.log_file)
    logger.info("%s from environment: [SET]", ENV_API_KEY)

    if telemetry or otlp_endpoint:
        from flightmcp.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(export_to_console=telemetry, otlp_endpoint=otlp_endpoint)
        except ImportError as exc:
            err_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    try:
        asyncio.run(run_server(settings))
    except KeyboardInterrupt:
        err_console.print("Interrupted - shutting down.")
