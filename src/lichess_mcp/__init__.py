"""lichess-mcp - the Lichess REST API as schema-validated MCP tools.

Every tool is a declarative ToolSpec: a pydantic argument model, a request
builder and an optional renderer. The Dispatcher runs each invocation through
validate -> resolve credential -> build -> send -> normalize, and every
failure surfaces as a ToolException carrying one ErrorCode.

Quick Start:
    >>> from lichess_mcp import CredentialStore, Dispatcher, LichessClient, build_registry
    >>>
    >>> async with LichessClient() as client:
    ...     dispatcher = Dispatcher(build_registry(), CredentialStore("lip_xxx"), client)
    ...     result = await dispatcher.invoke("get_user_public_data", {"username": "thibault"})
    ...     print(result.text)

Serving over MCP:
    $ LICHESS_TOKEN=lip_xxx lichess-mcp
"""

from __future__ import annotations

from .foundation import (
    CredentialStore,
    ErrorCode,
    LichessSettings,
    ToolError,
    ToolException,
    clear_settings_cache,
    get_settings,
)
from .gateway import Dispatcher, InvocationResult, LichessClient, RequestSpec, ToolSpec
from .registry import ToolRegistry
from .server import LichessServer
from .tools import ALL_TOOLS, build_registry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Dispatch
    "Dispatcher", "InvocationResult", "ToolSpec", "RequestSpec", "ToolRegistry", "ALL_TOOLS", "build_registry",
    # Transport & credentials
    "LichessClient", "CredentialStore",
    # Errors
    "ErrorCode", "ToolError", "ToolException",
    # Config
    "LichessSettings", "get_settings", "clear_settings_cache",
    # Server
    "LichessServer",
]
