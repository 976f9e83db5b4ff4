"""Unified error handling for lichess_mcp.

- ErrorCode: closed set of failure kinds
- ToolError/ToolException: structured errors and exceptions
- JSON aliases shared by the gateway layers
"""

from .errors import ErrorCode, ToolError, ToolException
from .types import JsonDict, JsonPrimitive, JsonValue

__all__ = [
    "ErrorCode", "ToolError", "ToolException",
    "JsonDict", "JsonPrimitive", "JsonValue",
]
