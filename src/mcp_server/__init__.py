"""mcp-server: a minimal Model Context Protocol tool server over stdio."""

from __future__ import annotations

__version__ = "0.1.0"
