"""Tests for request descriptions and builder helpers."""

import orjson
import pytest
from pydantic import ValidationError

from lichess_mcp.gateway import (
    AuthPolicy,
    HttpMethod,
    RequestSpec,
    endpoint,
    form,
    json_body,
    query,
    text_body,
)
from lichess_mcp.gateway.request import encode_value


def test_endpoint_percent_encodes_segments() -> None:
    assert endpoint("user", "a b/c") == "/user/a%20b%2Fc"
    assert endpoint("player", "top", 200, "blitz") == "/player/top/200/blitz"


def test_encode_value() -> None:
    assert encode_value(True) == "true"
    assert encode_value(False) == "false"
    assert encode_value(3.0) == "3"
    assert encode_value(2.5) == "2.5"
    assert encode_value(7) == "7"


def test_query_drops_none_and_keeps_order() -> None:
    assert query(("b", 1), ("a", None), ("c", False)) == (("b", "1"), ("c", "false"))


def test_form_body() -> None:
    body = form(("text", "hello world"), ("skip", None))
    assert body.content_type == "application/x-www-form-urlencoded"
    assert body.encode() == b"text=hello+world"


def test_json_body_drops_top_level_none_only() -> None:
    body = json_body({"name": "Arena", "description": None, "conditions": {"minRating": None}})
    assert orjson.loads(body.encode()) == {"name": "Arena", "conditions": {"minRating": None}}


def test_text_body() -> None:
    body = text_body("a,b,c")
    assert (body.content_type, body.encode()) == ("text/plain", b"a,b,c")


def test_defaults() -> None:
    spec = RequestSpec(path="/account")
    assert spec.method is HttpMethod.GET
    assert spec.auth is AuthPolicy.BEARER
    assert spec.encode_body() is None
    assert spec.content_type == "application/json"


def test_path_must_be_absolute() -> None:
    with pytest.raises(ValidationError):
        RequestSpec(path="account")


def test_spec_is_immutable() -> None:
    spec = RequestSpec(path="/account")
    with pytest.raises(ValidationError):
        spec.path = "/other"  # type: ignore[misc]


def test_headers_with_token() -> None:
    spec = RequestSpec(method=HttpMethod.POST, path="/users", body=text_body("a,b"))
    assert spec.headers("lip_abc") == {"Content-Type": "text/plain", "Authorization": "Bearer lip_abc"}


def test_headers_without_token() -> None:
    assert "Authorization" not in RequestSpec(path="/token/test", auth=AuthPolicy.NONE).headers(None)


def test_extra_headers_override_defaults() -> None:
    spec = RequestSpec(
        path="/game/export/abcdefgh",
        extra_headers=(("Accept", "application/json"), ("Authorization", "Bearer explicit")),
    )
    headers = spec.headers("lip_store")
    assert headers["Accept"] == "application/json"
    assert headers["Authorization"] == "Bearer explicit"
