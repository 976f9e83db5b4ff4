"""Entry point: `python -m lichess_mcp` / `lichess-mcp`.

Loads settings, configures logging, seeds the credential store and serves the
tool catalogue over stdio until the client disconnects.
"""

from __future__ import annotations

import asyncio

from .foundation import CredentialStore, LichessSettings, get_settings
from .gateway import Dispatcher, LichessClient
from .observability import configure_logging, get_logger
from .server import LichessServer
from .tools import build_registry

log = get_logger("lichess_mcp")


async def serve(settings: LichessSettings) -> None:
    """Run the server with one HTTP client for its whole lifetime."""
    store = CredentialStore(settings.token)
    async with LichessClient.from_settings(settings) as client:
        dispatcher = Dispatcher(build_registry(), store, client)
        server = LichessServer(dispatcher, name=settings.server_name, version=settings.server_version)
        log.info("startup", api_url=settings.api_url, token_configured=store.is_set)
        await server.run_stdio()


def main() -> None:
    settings = get_settings()
    configure_logging(settings.logging.format, settings.logging.level)
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        log.info("shutdown", reason="interrupted")


if __name__ == "__main__":
    main()
