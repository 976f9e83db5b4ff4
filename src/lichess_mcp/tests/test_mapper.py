"""Tests for status -> error classification and messages."""

import pytest

from lichess_mcp.foundation.errors import ErrorCode
from lichess_mcp.gateway import RawResponse, error_code_for, map_status
from lichess_mcp.tools.common import UsernameParams, fmt


def raw(status: int, reason: str = "", body: bytes = b"") -> RawResponse:
    return RawResponse(status=status, reason=reason, media_type="application/json", body=body)


@pytest.mark.parametrize(("status", "code"), [
    (404, ErrorCode.NOT_FOUND),
    (400, ErrorCode.INVALID_REQUEST),
    (401, ErrorCode.UPSTREAM_ERROR),
    (403, ErrorCode.UPSTREAM_ERROR),
    (409, ErrorCode.UPSTREAM_ERROR),
    (429, ErrorCode.UPSTREAM_ERROR),
    (500, ErrorCode.UPSTREAM_ERROR),
])
def test_kind_follows_status(status: int, code: ErrorCode) -> None:
    assert error_code_for(status) is code


def test_default_not_found() -> None:
    err = map_status("t", raw(404, "Not Found"))
    assert (err.code, err.error.message, err.error.status) == (ErrorCode.NOT_FOUND, "Resource not found", 404)


def test_default_not_found_with_remote_detail() -> None:
    err = map_status("t", raw(404, "Not Found", b'{"error":"No such game"}'))
    assert err.error.message == "Resource not found: No such game"


def test_default_invalid_request_prefers_remote_detail() -> None:
    assert map_status("t", raw(400, "Bad Request", b'{"error":"Invalid clock"}')).error.message == (
        "Invalid request: Invalid clock"
    )
    assert map_status("t", raw(400, "Bad Request")).error.message == "Invalid request: Bad Request"


def test_default_upstream_error_carries_reason() -> None:
    err = map_status("t", raw(429, "Too Many Requests"))
    assert err.code == ErrorCode.UPSTREAM_ERROR
    assert err.error.message == "Lichess API error: 429 Too Many Requests"


def test_non_json_error_body_ignored() -> None:
    assert map_status("t", raw(502, "Bad Gateway", b"<html/>")).error.message == "Lichess API error: 502 Bad Gateway"


def test_fixed_override_keeps_kind() -> None:
    err = map_status("join_team", raw(403, "Forbidden"), messages={403: "You are not allowed to join this team"})
    assert err.code == ErrorCode.UPSTREAM_ERROR
    assert err.error.message == "You are not allowed to join this team"


def test_callable_override_reads_params() -> None:
    params = UsernameParams(username="nobody")
    err = map_status("get_user_public_data", raw(404), params, {404: fmt("User {username} not found")})
    assert err.code == ErrorCode.NOT_FOUND
    assert err.error.message == "User nobody not found"


def test_override_for_other_status_not_applied() -> None:
    err = map_status("t", raw(500, "Internal Server Error"), messages={404: "gone"})
    assert err.error.message.startswith("Lichess API error: 500")
