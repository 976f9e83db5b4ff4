"""Decode a successful response according to its declared content kind."""

from __future__ import annotations

import orjson

from ..foundation.errors import ErrorCode, JsonValue, ToolException
from .response import ContentKind, Json, NormalizedResult, RawResponse, RecordStream, Text


def normalize(tool_name: str, raw: RawResponse) -> NormalizedResult:
    """Decode `raw.body` into exactly one result variant.

    - PGN: the body as text, unmodified
    - NDJSON: one document per non-blank line, in line order
    - anything else: the whole body as one JSON document

    A body that is empty or only whitespace decodes to Text("") for every
    kind, since mutation endpoints may answer with no content.

    Raises:
        ToolException: PARSE_ERROR when the body does not decode under its kind.
    """
    text = _decode_text(tool_name, raw.body)
    if not text.strip():
        return Text("")
    match raw.content_kind:
        case ContentKind.PGN:
            return Text(text)
        case ContentKind.NDJSON:
            return RecordStream(decode_ndjson(tool_name, text))
        case _:
            return Json(_loads(tool_name, text, what="response body"))


def decode_ndjson(tool_name: str, text: str) -> tuple[JsonValue, ...]:
    """Parse each non-blank line independently. A malformed line fails the whole body."""
    records: list[JsonValue] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if line.strip():
            records.append(_loads(tool_name, line, what=f"NDJSON line {lineno}"))
    return tuple(records)


def _loads(tool_name: str, text: str, *, what: str) -> JsonValue:
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raise ToolException.create(tool_name, f"Could not parse {what} as JSON: {e}", ErrorCode.PARSE_ERROR) from e


def _decode_text(tool_name: str, body: bytes) -> str:
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ToolException.create(tool_name, f"Response body is not valid UTF-8: {e}", ErrorCode.PARSE_ERROR) from e
