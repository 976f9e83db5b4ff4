"""HTTP transport to the Lichess API using httpx.

One request per call, no retries. Timeouts and connection failures become
TRANSPORT_ERROR; every HTTP status, success or not, is returned as a
RawResponse for the error mapper to judge.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

import httpx

from ..foundation.errors import ErrorCode, ToolException
from ..observability import get_logger
from .request import RequestSpec
from .response import RawResponse, media_type_of

if TYPE_CHECKING:
    from types import TracebackType

    from ..foundation.config import LichessSettings

DEFAULT_BASE_URL = "https://lichess.org/api"

log = get_logger("lichess_mcp.transport")


class LichessClient:
    """Lazy httpx.AsyncClient bound to the API base URL.

    Example:
        >>> async with LichessClient() as client:
        ...     raw = await client.send("get_my_profile", RequestSpec(path="/account"), token)
    """

    __slots__ = ("_base_url", "_timeout", "_user_agent", "_verify", "_follow_redirects", "_transport", "_client")

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 30.0,
        user_agent: str = "lichess-mcp/0.1.0",
        verify: bool = True,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._user_agent = user_agent
        self._verify = verify
        self._follow_redirects = follow_redirects
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: LichessSettings, *, transport: httpx.AsyncBaseTransport | None = None) -> Self:
        return cls(
            settings.api_url,
            timeout=settings.http.timeout,
            user_agent=settings.http.user_agent,
            verify=settings.http.verify_ssl,
            follow_redirects=settings.http.follow_redirects,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create httpx async client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                verify=self._verify,
                follow_redirects=self._follow_redirects,
                headers={"User-Agent": self._user_agent},
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def send(self, tool_name: str, request: RequestSpec, token: str | None) -> RawResponse:
        """Perform `request`, attaching `token` as bearer credential when given."""
        client = await self._get_client()
        try:
            response = await client.request(
                request.method.value,
                request.path,
                params=list(request.query) or None,
                content=request.encode_body(),
                headers=request.headers(token),
            )
        except httpx.TimeoutException as e:
            raise ToolException.create(
                tool_name, f"Request timed out after {self._timeout}s", ErrorCode.TRANSPORT_ERROR,
            ) from e
        except httpx.TransportError as e:
            raise ToolException.create(tool_name, f"Network error: {e}", ErrorCode.TRANSPORT_ERROR) from e

        log.debug("http.response", tool=tool_name, method=request.method.value,
                  path=request.path, status=response.status_code)
        return RawResponse(
            status=response.status_code,
            reason=response.reason_phrase,
            media_type=media_type_of(response.headers.get("content-type")),
            body=response.content,
        )
