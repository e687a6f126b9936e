"""mcp-server CLI entrypoint."""

from __future__ import annotations

import click

from mcp_server import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mcp-server")
def main() -> None:
    """mcp-server: a minimal MCP tool server over stdio."""


# Register subcommands
from mcp_server.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
