"""Logging setup for the stdio server.

stdout carries protocol traffic, so every diagnostic goes to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_HANDLER_NAME = "mcp_server.stderr"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", *, stream: TextIO | None = None) -> logging.Handler:
    """Attach a single stderr handler to the ``mcp_server`` logger.

    Calling it again replaces the previously installed handler.
    """
    package_logger = logging.getLogger("mcp_server")
    for existing in list(package_logger.handlers):
        if existing.name == _HANDLER_NAME:
            package_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
    return handler
