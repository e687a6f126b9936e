"""``mcp-server tools``: show the tools the server advertises."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mcp_server.cli_commands._output import (
    config_option,
    console,
    load_settings_or_exit,
    print_json,
    print_tools_table,
)

if TYPE_CHECKING:
    from pathlib import Path


@click.command("tools")
@config_option
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list result as JSON.")
def tools_cmd(config_path: Path | None, as_json: bool) -> None:
    """List the registered tools."""
    from mcp_server.dispatcher import McpServer
    from mcp_server.utils.log import configure_logging

    settings = load_settings_or_exit(config_path)
    configure_logging(settings.log_level)

    server = McpServer()

    if as_json:
        print_json(server.list_tools())
        return

    descriptors = server.registry.list()
    if not descriptors:
        console.print("[yellow]No tools registered.[/yellow]")
        return

    print_tools_table(descriptors)
