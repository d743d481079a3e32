"""``flightmcp tools`` — inspect the tools this server exposes."""

from __future__ import annotations

import json

import click

from flightmcp.cli_commands._output import console, print_tools_table


@click.group()
def tools() -> None:
    """Inspect registered tools."""


@tools.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print the mcp/listTools payload.")
def list_tools(as_json: bool) -> None:
    """List tools and their required arguments."""
    from flightmcp.tools import TOOL_DESCRIPTORS

    if as_json:
        console.print_json(json.dumps({"tools": [d.to_wire() for d in TOOL_DESCRIPTORS]}))
        return

    print_tools_table(TOOL_DESCRIPTORS)
