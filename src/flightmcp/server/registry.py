"""Tool registry — the static set of tools this server exposes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from flightmcp.server.models import ToolDescriptor

ToolFunction = Callable[[dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class Tool:
    """A registered tool: wire descriptor, implementation and call-shape hint.

    ``call_shape`` is echoed in invalid-params errors so the caller can see
    what a correct ``arguments`` object looks like.
    """

    descriptor: ToolDescriptor
    function: ToolFunction
    call_shape: str = ""

    @property
    def name(self) -> str:
        return self.descriptor.name


class ToolRegistry:
    """Name-to-tool map, populated once at startup and read-only afterwards.

    Usage::

        registry = ToolRegistry()
        registry.register(build_flight_tool(provider))

        registry.descriptors()          # for mcp/listTools
        registry.get("getFlightInfo")   # for mcp/invokeTool
    """

    def __init__(self, tools: list[Tool] | None = None) -> None:
        self._tools: dict[str, Tool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: Tool) -> None:
        if tool.name in self._tools:
            msg = f"Tool already registered: {tool.name}"
            raise ValueError(msg)
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def descriptors(self) -> list[dict[str, Any]]:
        """Return every descriptor in wire form, in registration order."""
        return [tool.descriptor.to_wire() for tool in self._tools.values()]

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools


def missing_arguments(descriptor: ToolDescriptor, arguments: dict[str, Any]) -> list[str]:
    """Return every required key of *descriptor* absent from *arguments*.

    Presence only: values are not type- or format-checked.
    """
    return [key for key in descriptor.required if key not in arguments]
