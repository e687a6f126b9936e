"""Shared CLI output formatters and option helpers."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from mcp_server.config import ServerSettings
    from mcp_server.protocol.models import ToolDescriptor

console = Console()
# stdout belongs to the protocol while serving.
err_console = Console(stderr=True)


def print_tools_table(tools: list[ToolDescriptor]) -> None:
    """Pretty-print the registered tools as a table."""
    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Required")

    for tool in tools:
        required = tool.input_schema.get("required", [])
        table.add_row(
            tool.name,
            _truncate(tool.description),
            ", ".join(str(r) for r in required) or "-",
        )

    console.print(table)


def print_json(data: Any) -> None:
    console.print_json(json.dumps(data))


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def load_settings_or_exit(path: Path | None) -> ServerSettings:
    """Load settings for a command, exiting with status 1 on a bad file."""
    from mcp_server.config import load_settings
    from mcp_server.errors import ConfigError

    try:
        return load_settings(path)
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)


config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML settings file.",
)
