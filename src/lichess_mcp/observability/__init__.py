"""Observability: structured logging to stderr."""

from .logging import (
    BoundLogger,
    CaptureRenderer,
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    LogRenderer,
    NoOpRenderer,
    configure_logging,
    get_logger,
    set_renderer,
)

__all__ = [
    "BoundLogger", "LogEntry", "LogRenderer",
    "ConsoleRenderer", "JsonRenderer", "NoOpRenderer", "CaptureRenderer",
    "configure_logging", "get_logger", "set_renderer",
]
