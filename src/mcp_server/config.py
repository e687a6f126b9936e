"""Server settings and the YAML loader behind ``--config``.

Settings cover logging and telemetry only.  The server identity sent in
the ``initialize`` result is fixed and cannot be configured.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from mcp_server.errors import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None
    export_to_console: bool = False


class ServerSettings(BaseModel):
    """Ambient configuration of the server.

    Unknown keys are rejected, so a stale ``name`` or ``protocol_version``
    entry fails loudly.
    """

    model_config = {"extra": "forbid"}

    log_level: LogLevel = "WARNING"
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def load_settings(path: Path | None = None) -> ServerSettings:
    """Read YAML, interpolate env vars, and validate.

    Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
    using :func:`os.path.expandvars` before YAML parsing.  An empty file
    and ``path=None`` both yield the defaults.

    Raises:
        ConfigError: On read errors, YAML parse errors or validation failures.
    """
    if path is None:
        return ServerSettings()

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    try:
        data: Any = yaml.safe_load(os.path.expandvars(raw))
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parse error: {exc}") from exc

    if data is None:
        return ServerSettings()
    if not isinstance(data, dict):
        raise ConfigError("Settings YAML must be a mapping")

    try:
        return ServerSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
