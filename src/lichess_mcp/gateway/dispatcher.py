"""Route invocations through validate -> build -> send -> normalize.

The dispatcher owns the credential store and the HTTP client; every tool
call runs one pipeline to completion and yields a single text payload or
raises ToolException.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict

from ..foundation.credentials import CredentialStore
from ..foundation.errors import ErrorCode, ToolException
from ..observability import get_logger
from .mapper import map_status
from .normalize import normalize
from .request import AuthPolicy, RequestSpec
from .response import NormalizedResult
from .transport import LichessClient
from .validation import ToolParams, validate_arguments

if TYPE_CHECKING:
    from ..registry import ToolRegistry
    from .tool import ToolSpec

log = get_logger("lichess_mcp.dispatcher")

MISSING_TOKEN_MESSAGE = "Lichess API token not set. Use the set_token tool first."


class TextContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class InvocationResult(BaseModel):
    """`{content: [{type: "text", text}]}`"""

    model_config = ConfigDict(frozen=True)

    content: tuple[TextContent, ...]

    @classmethod
    def of(cls, text: str) -> InvocationResult:
        return cls(content=(TextContent(text=text),))

    @property
    def text(self) -> str:
        return "".join(c.text for c in self.content)


class Dispatcher:
    """Name-keyed entry point for tool invocations.

    Example:
        >>> dispatcher = Dispatcher(build_registry(), CredentialStore("lip_abc"), LichessClient())
        >>> result = await dispatcher.invoke("get_leaderboard", {"perfType": "blitz", "nb": 10})
        >>> print(result.text)
    """

    __slots__ = ("_registry", "_store", "_client")

    def __init__(self, registry: ToolRegistry, store: CredentialStore, client: LichessClient) -> None:
        self._registry = registry
        self._store = store
        self._client = client

    @property
    def store(self) -> CredentialStore:
        return self._store

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def invoke(self, name: str, arguments: dict[str, Any] | None = None) -> InvocationResult:
        """Run tool `name` with `arguments`.

        Raises:
            ToolException: for unknown tools and every pipeline failure.
        """
        tool = self._registry.get(name)
        if tool is None:
            raise ToolException.create(name or "unknown", f"Unknown tool: {name}", ErrorCode.UNKNOWN_TOOL)

        tool_log = log.bind(tool=name)
        tool_log.debug("tool.start")
        start = time.perf_counter()
        try:
            text = await self._run(tool, arguments)
        except ToolException as e:
            tool_log.warning("tool.error", code=e.code.value, status=e.error.status,
                             duration_ms=round((time.perf_counter() - start) * 1000, 1))
            raise
        tool_log.info("tool.ok", duration_ms=round((time.perf_counter() - start) * 1000, 1))
        return InvocationResult.of(text)

    async def _run(self, tool: ToolSpec[Any], arguments: dict[str, Any] | None) -> str:
        params = validate_arguments(tool.name, tool.params, arguments)
        try:
            if tool.handler is not None:
                return await tool.handler(self, params)
            assert tool.build is not None
            request = tool.build(params)
            result = await self.execute(tool, params, request, self.resolve_token(tool, request))
            return tool.render(params, result) if tool.render else result.render()
        except ToolException as e:
            raise e.prefixed(tool.action) from e

    def resolve_token(self, tool: ToolSpec[Any], request: RequestSpec) -> str | None:
        """Read the store once for a BEARER request; absent token is MISSING_CREDENTIAL."""
        if request.auth is AuthPolicy.NONE:
            return None
        if (token := self._store.get()) is None:
            raise ToolException.create(tool.name, MISSING_TOKEN_MESSAGE, ErrorCode.MISSING_CREDENTIAL)
        return token

    async def execute(
        self,
        tool: ToolSpec[Any],
        params: ToolParams,
        request: RequestSpec,
        token: str | None,
    ) -> NormalizedResult:
        """Send `request` and decode the response, mapping failures to ToolException."""
        raw = await self._client.send(tool.name, request, token)
        if not raw.ok:
            raise map_status(tool.name, raw, params, tool.messages)
        if tool.accepts is not None and raw.body.strip() and raw.content_kind not in tool.accepts:
            raise ToolException.create(
                tool.name, f"Unexpected response format: {raw.media_type or 'no content type'}",
                ErrorCode.PARSE_ERROR,
            )
        return normalize(tool.name, raw)
