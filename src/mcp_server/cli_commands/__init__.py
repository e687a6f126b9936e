"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from mcp_server.cli_commands.serve import serve_cmd
    from mcp_server.cli_commands.tools import tools_cmd

    cli.add_command(serve_cmd)
    cli.add_command(tools_cmd)
