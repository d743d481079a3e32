"""Tools exposed by the server."""

from flightmcp.tools.flights import FLIGHT_INFO_DESCRIPTOR, GET_FLIGHT_INFO, build_flight_tool

TOOL_DESCRIPTORS = [FLIGHT_INFO_DESCRIPTOR]

__all__ = ["GET_FLIGHT_INFO", "TOOL_DESCRIPTORS", "build_flight_tool"]
