"""Tests for response decoding by declared content kind."""

import pytest

from lichess_mcp.foundation.errors import ErrorCode, ToolException
from lichess_mcp.gateway import ContentKind, Json, RawResponse, RecordStream, Text, normalize
from lichess_mcp.gateway.response import media_type_of


def raw(body: bytes, media_type: str | None = "application/json", status: int = 200) -> RawResponse:
    return RawResponse(status=status, reason="OK", media_type=media_type, body=body)


# ═══════════════════════════════════════════════════════════════════════════════
# Content kinds
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(("media_type", "kind"), [
    ("application/x-chess-pgn", ContentKind.PGN),
    ("application/vnd.chess-pgn", ContentKind.PGN),
    ("application/x-ndjson", ContentKind.NDJSON),
    ("application/json", ContentKind.JSON),
    ("text/plain", ContentKind.JSON),
    (None, ContentKind.JSON),
])
def test_content_kind_from_media_type(media_type: str | None, kind: ContentKind) -> None:
    assert ContentKind.from_media_type(media_type) is kind


def test_media_type_strips_parameters() -> None:
    assert media_type_of("Application/X-NDJSON; charset=utf-8") == "application/x-ndjson"
    assert media_type_of(None) is None
    assert media_type_of("") is None


# ═══════════════════════════════════════════════════════════════════════════════
# Decoding
# ═══════════════════════════════════════════════════════════════════════════════


def test_ndjson_skips_blank_lines_and_keeps_order() -> None:
    result = normalize("t", raw(b'{"a":1}\n\n{"a":2}\n', "application/x-ndjson"))
    assert isinstance(result, RecordStream)
    assert result.records == ({"a": 1}, {"a": 2})


def test_ndjson_crlf_lines() -> None:
    result = normalize("t", raw(b'{"a":1}\r\n{"a":2}\r\n', "application/x-ndjson"))
    assert len(result) == 2  # type: ignore[arg-type]


def test_ndjson_malformed_line_is_parse_error() -> None:
    with pytest.raises(ToolException) as exc_info:
        normalize("t", raw(b'{"a":1}\n{oops\n', "application/x-ndjson"))
    assert exc_info.value.code == ErrorCode.PARSE_ERROR
    assert "NDJSON line 2" in exc_info.value.error.message


def test_pgn_passthrough() -> None:
    result = normalize("t", raw(b"1. e4 e5 *", "application/x-chess-pgn"))
    assert result == Text("1. e4 e5 *")
    assert result.render() == "1. e4 e5 *"


def test_json_document() -> None:
    result = normalize("t", raw(b'{"id":"thibault","count":{"all":3}}'))
    assert isinstance(result, Json)
    assert result.document == {"id": "thibault", "count": {"all": 3}}


def test_json_render_is_indented() -> None:
    assert Json({"a": [1]}).render() == '{\n  "a": [\n    1\n  ]\n}'


def test_record_stream_renders_as_array() -> None:
    assert RecordStream(({"a": 1},)).render() == '[\n  {\n    "a": 1\n  }\n]'


def test_invalid_json_is_parse_error() -> None:
    with pytest.raises(ToolException) as exc_info:
        normalize("t", raw(b"<html>oops</html>"))
    assert exc_info.value.code == ErrorCode.PARSE_ERROR


@pytest.mark.parametrize("media_type", ["application/json", "application/x-ndjson", "application/x-chess-pgn", None])
def test_empty_body_is_empty_text(media_type: str | None) -> None:
    assert normalize("t", raw(b"  \n", media_type)) == Text("")


def test_invalid_utf8_is_parse_error() -> None:
    with pytest.raises(ToolException) as exc_info:
        normalize("t", raw(b"\xff\xfe", "application/x-chess-pgn"))
    assert exc_info.value.code == ErrorCode.PARSE_ERROR
