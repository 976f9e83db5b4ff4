"""Tests for the httpx transport client."""

import httpx
import pytest

from lichess_mcp.foundation.config import LichessSettings
from lichess_mcp.foundation.errors import ErrorCode, ToolException
from lichess_mcp.gateway import AuthPolicy, HttpMethod, LichessClient, RequestSpec, form, query


@pytest.mark.asyncio
async def test_send_joins_base_url_and_query(http, client) -> None:
    http.respond_with(200, json={"ok": True})
    raw = await client.send(
        "get_timeline", RequestSpec(path="/timeline", query=query(("since", 5), ("nb", 15))), "lip_abc",
    )
    assert raw.status == 200
    assert raw.media_type == "application/json"
    assert str(http.last.url) == "https://lichess.test/api/timeline?since=5&nb=15"
    assert http.last.headers["Authorization"] == "Bearer lip_abc"
    assert http.last.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_send_form_body(http, client) -> None:
    await client.send(
        "add_user_note",
        RequestSpec(method=HttpMethod.POST, path="/user/bob/note", body=form(("text", "good game"))),
        "lip_abc",
    )
    assert http.last.method == "POST"
    assert http.last.content == b"text=good+game"
    assert http.last.headers["Content-Type"] == "application/x-www-form-urlencoded"


@pytest.mark.asyncio
async def test_send_without_token(http, client) -> None:
    await client.send("test_tokens", RequestSpec(path="/token/test", auth=AuthPolicy.NONE), None)
    assert "Authorization" not in http.last.headers


@pytest.mark.asyncio
async def test_user_agent_header(http) -> None:
    client = LichessClient("https://lichess.test/api", user_agent="tester/1.0", transport=http.transport)
    await client.send("t", RequestSpec(path="/account"), None)
    assert http.last.headers["User-Agent"] == "tester/1.0"
    await client.aclose()


@pytest.mark.asyncio
async def test_error_status_returned_not_raised(http, client) -> None:
    http.respond_with(503, text="down")
    raw = await client.send("t", RequestSpec(path="/account"), None)
    assert not raw.ok
    assert (raw.status, raw.reason) == (503, "Service Unavailable")


@pytest.mark.asyncio
async def test_timeout_is_transport_error(http, client) -> None:
    def slow(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    http.respond(slow)
    with pytest.raises(ToolException) as exc_info:
        await client.send("get_my_profile", RequestSpec(path="/account"), None)
    assert exc_info.value.code == ErrorCode.TRANSPORT_ERROR
    assert "timed out" in exc_info.value.error.message


@pytest.mark.asyncio
async def test_connection_failure_is_transport_error(http, client) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    http.respond(refuse)
    with pytest.raises(ToolException) as exc_info:
        await client.send("get_my_profile", RequestSpec(path="/account"), None)
    assert exc_info.value.code == ErrorCode.TRANSPORT_ERROR
    assert exc_info.value.error.message == "Network error: connection refused"


@pytest.mark.asyncio
async def test_from_settings(http) -> None:
    settings = LichessSettings(api_url="https://lichess.dev/api/", _env_file=None)
    client = LichessClient.from_settings(settings, transport=http.transport)
    assert client.base_url == "https://lichess.dev/api"
    await client.send("t", RequestSpec(path="/account"), None)
    assert str(http.last.url) == "https://lichess.dev/api/account"
    await client.aclose()


@pytest.mark.asyncio
async def test_context_manager_closes_client(http) -> None:
    async with LichessClient("https://lichess.test/api", transport=http.transport) as client:
        await client.send("t", RequestSpec(path="/account"), None)
    assert client._client is None
