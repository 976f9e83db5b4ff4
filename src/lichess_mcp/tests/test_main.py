"""Tests for the process entry point."""

import pytest

from lichess_mcp.__main__ import serve
from lichess_mcp.foundation.config import LichessSettings
from lichess_mcp.server import LichessServer


@pytest.fixture
def served(monkeypatch: pytest.MonkeyPatch) -> list[LichessServer]:
    """Replace stdio serving with a recorder of the server it was asked to run."""
    servers: list[LichessServer] = []

    async def run_stdio(self: LichessServer) -> None:
        servers.append(self)

    monkeypatch.setattr(LichessServer, "run_stdio", run_stdio)
    for name in ("LICHESS_TOKEN", "LICHESS_API_URL"):
        monkeypatch.delenv(name, raising=False)
    return servers


@pytest.mark.asyncio
async def test_serve_seeds_store_from_settings(served, captured_logs) -> None:
    await serve(LichessSettings(token="lip_startup", _env_file=None))
    assert len(served) == 1
    server = served[0]
    assert server.dispatcher.store.get() == "lip_startup"
    assert len(server.dispatcher.registry) == 88
    startup = next(e for e in captured_logs.entries if e.event == "startup")
    assert startup.context["token_configured"] is True
    assert startup.context["api_url"] == "https://lichess.org/api"


@pytest.mark.asyncio
async def test_serve_without_token(served, captured_logs) -> None:
    await serve(LichessSettings(_env_file=None))
    assert not served[0].dispatcher.store.is_set
    startup = next(e for e in captured_logs.entries if e.event == "startup")
    assert startup.context["token_configured"] is False
