"""OpenTelemetry tracing for the request path.

Spans are opened with the API tracer only, so when no SDK provider is
installed every span is a no-op.  ``flightmcp serve --telemetry`` calls
:func:`configure_telemetry`, which needs the ``otel`` extra
(``pip install flightmcp[otel]``).

Span names:

* ``flightmcp.rpc.<method>`` — one per dispatched request
* ``flightmcp.tool.invoke`` — a tool call that passed validation
* ``flightmcp.provider.search`` — the outbound SerpAPI request
"""

from __future__ import annotations

import sys
from typing import Any

from opentelemetry import trace

ATTR_RPC_METHOD = "flightmcp.rpc.method"
ATTR_RPC_ID = "flightmcp.rpc.id"
ATTR_RPC_ERROR_CODE = "flightmcp.rpc.error_code"
ATTR_TOOL_NAME = "flightmcp.tool.name"
ATTR_TOOL_IS_ERROR = "flightmcp.tool.is_error"
ATTR_ROUTE_ORIGIN = "flightmcp.route.origin"
ATTR_ROUTE_DESTINATION = "flightmcp.route.destination"
ATTR_ROUTE_DATE = "flightmcp.route.date"
ATTR_FLIGHT_COUNT = "flightmcp.flights.count"
ATTR_HTTP_STATUS = "flightmcp.http.status_code"

_INSTRUMENTATION_NAME = "flightmcp"
_SDK_HINT = "Install it with: pip install flightmcp[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Tracer for *name*; a no-op until :func:`configure_telemetry` runs."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "flightmcp",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider with the requested exporters.

    Console spans go to stderr: stdout belongs to the JSON-RPC stream.

    Raises
    ------
    ImportError
        If ``opentelemetry-sdk`` (or, with *otlp_endpoint*, the OTLP
        exporter) is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace import export  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
    except ImportError as exc:
        msg = f"opentelemetry-sdk is required for configure_telemetry(). {_SDK_HINT}"
        raise ImportError(msg) from exc

    processors: list[Any] = []
    if export_to_console:
        processors.append(export.SimpleSpanProcessor(export.ConsoleSpanExporter(out=sys.stderr)))
    if otlp_endpoint:
        processors.append(export.BatchSpanProcessor(_otlp_exporter(otlp_endpoint)))

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))  # pyright: ignore[reportUnknownVariableType]
    for processor in processors:
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)  # pyright: ignore[reportUnknownArgumentType]


def _otlp_exporter(endpoint: str) -> Any:
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
    except ImportError as exc:
        msg = f"opentelemetry-exporter-otlp is required for OTLP export. {_SDK_HINT}"
        raise ImportError(msg) from exc
    return OTLPSpanExporter(endpoint=endpoint)
