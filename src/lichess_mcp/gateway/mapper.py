"""Map unsuccessful HTTP outcomes to classified tool errors.

Kinds depend only on the status: 404 is NOT_FOUND, 400 is INVALID_REQUEST,
anything else non-2xx is UPSTREAM_ERROR. Tools may replace the message for
a status but never the kind.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import orjson

from ..foundation.errors import ErrorCode, ToolException
from .response import RawResponse

StatusMessage = str | Callable[[Any], str]


def error_code_for(status: int) -> ErrorCode:
    match status:
        case 404: return ErrorCode.NOT_FOUND
        case 400: return ErrorCode.INVALID_REQUEST
        case _: return ErrorCode.UPSTREAM_ERROR


def map_status(
    tool_name: str,
    raw: RawResponse,
    params: Any = None,
    messages: Mapping[int, StatusMessage] | None = None,
) -> ToolException:
    """Build the exception for a non-2xx response.

    `messages` maps a status to a fixed text or a callable taking the
    validated params, so 404 messages can name the identifier looked up.
    """
    override = (messages or {}).get(raw.status)
    if override is not None:
        message = override(params) if callable(override) else override
    else:
        message = _default_message(raw)
    return ToolException.create(tool_name, message, error_code_for(raw.status), status=raw.status)


def remote_error(raw: RawResponse) -> str | None:
    """The `error` text Lichess puts in JSON error bodies, if any."""
    if not raw.body:
        return None
    try:
        doc = orjson.loads(raw.body)
    except orjson.JSONDecodeError:
        return None
    if isinstance(doc, dict) and isinstance(err := doc.get("error"), str) and err.strip():
        return err.strip()
    return None


def _default_message(raw: RawResponse) -> str:
    detail = remote_error(raw)
    match raw.status:
        case 404:
            return "Resource not found" + (f": {detail}" if detail else "")
        case 400:
            return f"Invalid request: {detail or raw.reason or 'Bad Request'}"
        case _:
            reason = f"{raw.status} {raw.reason}".strip()
            return f"Lichess API error: {reason}" + (f" ({detail})" if detail else "")
