"""``mcp-server serve``: answer JSON-RPC requests on stdin/stdout."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from mcp_server.cli_commands._output import config_option, err_console, load_settings_or_exit

if TYPE_CHECKING:
    from pathlib import Path


@click.command("serve")
@config_option
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.option("--telemetry", is_flag=True, help="Enable OpenTelemetry tracing.")
def serve_cmd(config_path: Path | None, log_level: str | None, telemetry: bool) -> None:
    """Serve requests, one JSON object per line, until end of input."""
    from mcp_server.dispatcher import McpServer
    from mcp_server.protocol.transport import serve, stdio
    from mcp_server.utils.log import configure_logging
    from mcp_server.utils.telemetry import configure_telemetry

    settings = load_settings_or_exit(config_path)

    if log_level:
        settings.log_level = log_level.upper()  # type: ignore[assignment]
    if telemetry:
        settings.telemetry.enabled = True

    configure_logging(settings.log_level)

    if settings.telemetry.enabled:
        try:
            configure_telemetry(settings.telemetry)
        except ImportError as exc:
            err_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    try:
        serve(McpServer(), stdio())
    except OSError as exc:
        err_console.print(f"[red]Transport error:[/red] {exc}")
        sys.exit(1)
