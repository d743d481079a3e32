"""flightmcp CLI entrypoint."""

from __future__ import annotations

import click

from flightmcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="flightmcp")
def main() -> None:
    """flightmcp — SerpAPI flight search as an MCP stdio server."""


# Register subcommands
from flightmcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
