"""Shared fixtures: a recording mock transport, isolated stores and captured logs."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest

from lichess_mcp.foundation.config import clear_settings_cache
from lichess_mcp.foundation.credentials import CredentialStore
from lichess_mcp.gateway import Dispatcher, LichessClient
from lichess_mcp.observability import CaptureRenderer, set_renderer
from lichess_mcp.tools import build_registry

BASE_URL = "https://lichess.test/api"
TOKEN = "lip_test_token"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport:
    """httpx.MockTransport that keeps every request it answers.

    The response comes from `handler`, replaceable per test through respond().
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._handler: Handler = lambda request: httpx.Response(200, json={})
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def respond(self, handler: Handler) -> None:
        self._handler = handler

    def respond_with(self, status: int = 200, **kwargs: object) -> None:
        """Answer every request with the same response."""
        self._handler = lambda request: httpx.Response(status, **kwargs)  # type: ignore[arg-type]

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture(autouse=True)
def clean_settings() -> Iterator[None]:
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def captured_logs() -> Iterator[CaptureRenderer]:
    renderer = CaptureRenderer()
    set_renderer(renderer)
    yield renderer
    set_renderer(None)


@pytest.fixture
def http() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def store() -> CredentialStore:
    return CredentialStore(TOKEN)


@pytest.fixture
def empty_store() -> CredentialStore:
    return CredentialStore()


@pytest.fixture
def client(http: RecordingTransport) -> LichessClient:
    return LichessClient(BASE_URL, transport=http.transport)


@pytest.fixture
def dispatcher(store: CredentialStore, client: LichessClient) -> Dispatcher:
    return Dispatcher(build_registry(), store, client)


@pytest.fixture
def anonymous(empty_store: CredentialStore, client: LichessClient) -> Dispatcher:
    """Dispatcher whose credential store starts empty."""
    return Dispatcher(build_registry(), empty_store, client)


@pytest.fixture
def token() -> str:
    return TOKEN
