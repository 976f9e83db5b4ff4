"""MCP server wiring for the Lichess gateway.

Adapts the low-level `mcp.server.Server` to the Dispatcher: tools are listed
from the registry, calls are delegated to Dispatcher.invoke(), and one
prompt template is served.

Example:
    >>> server = LichessServer(dispatcher)
    >>> await server.run_stdio()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import GetPromptResult, Prompt, PromptMessage, TextContent, Tool

from ..observability import get_logger

if TYPE_CHECKING:
    from ..gateway import Dispatcher

log = get_logger("lichess_mcp.server")

SERVER_NAME = "lichess-mcp"
SERVER_VERSION = "0.1.0"

ANALYZE_POSITION = "analyze_position"
ANALYZE_POSITION_DESCRIPTION = "Analyze the current position of a game"
ANALYZE_POSITION_TEXT = (
    "Please analyze the current chess position and suggest the best moves for both sides. Consider:\n"
    "1. Material balance\n"
    "2. Piece activity\n"
    "3. King safety\n"
    "4. Pawn structure\n"
    "5. Tactical opportunities"
)


class LichessServer:
    """Low-level MCP server exposing the dispatch table.

    A ToolException raised by the dispatcher propagates into the MCP library,
    which answers with an error result carrying the exception message.
    """

    __slots__ = ("_dispatcher", "_server")

    def __init__(self, dispatcher: Dispatcher, *, name: str = SERVER_NAME, version: str = SERVER_VERSION) -> None:
        self._dispatcher = dispatcher
        self._server = self._create_server(name, version)

    def _create_server(self, name: str, version: str) -> Server:
        server: Server = Server(name, version=version)
        server.list_tools()(self.list_tools)
        server.call_tool(validate_input=False)(self.call_tool)
        server.list_prompts()(self.list_prompts)
        server.get_prompt()(self.get_prompt)
        return server

    @property
    def server(self) -> Server:
        """Access the underlying MCP server."""
        return self._server

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    # ─────────────────────────────────────────────────────────────────────────
    # Handlers
    # ─────────────────────────────────────────────────────────────────────────

    async def list_tools(self) -> list[Tool]:
        return [
            Tool(name=tool.name, description=tool.metadata.description, inputSchema=tool.input_schema())
            for tool in self._dispatcher.registry
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        result = await self._dispatcher.invoke(name, arguments)
        return [TextContent(type="text", text=item.text) for item in result.content]

    async def list_prompts(self) -> list[Prompt]:
        return [Prompt(name=ANALYZE_POSITION, description=ANALYZE_POSITION_DESCRIPTION, arguments=[])]

    async def get_prompt(self, name: str, arguments: dict[str, str] | None = None) -> GetPromptResult:
        if name != ANALYZE_POSITION:
            raise ValueError(f"Unknown prompt: {name}")
        return GetPromptResult(
            description=ANALYZE_POSITION_DESCRIPTION,
            messages=[PromptMessage(role="user", content=TextContent(type="text", text=ANALYZE_POSITION_TEXT))],
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Transport
    # ─────────────────────────────────────────────────────────────────────────

    async def run_stdio(self) -> None:
        """Serve over stdin/stdout until the client disconnects."""
        log.info("server.start", transport="stdio", tools=len(self._dispatcher.registry))
        async with stdio_server() as (read_stream, write_stream):
            await self._server.run(read_stream, write_stream, self._server.create_initialization_options())
        log.info("server.stop")
