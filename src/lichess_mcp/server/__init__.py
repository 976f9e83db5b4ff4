"""MCP server surface."""

from .app import ANALYZE_POSITION, ANALYZE_POSITION_TEXT, SERVER_NAME, SERVER_VERSION, LichessServer

__all__ = ["LichessServer", "SERVER_NAME", "SERVER_VERSION", "ANALYZE_POSITION", "ANALYZE_POSITION_TEXT"]
