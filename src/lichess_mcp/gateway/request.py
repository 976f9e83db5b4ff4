"""Outbound request description produced by tool builders.

A RequestSpec is plain data: method, path, ordered query pairs, one optional
body and the auth policy. The transport turns it into an httpx call.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal
from urllib.parse import quote, urlencode

import orjson
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..foundation.errors import JsonDict

Pairs = tuple[tuple[str, str], ...]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class AuthPolicy(StrEnum):
    """How the transport authenticates a request.

    BEARER attaches the token held by the credential store. NONE sends no
    Authorization header unless the builder supplies one in extra_headers.
    """
    BEARER = "bearer"
    NONE = "none"


# ─────────────────────────────────────────────────────────────────────────────
# Bodies
# ─────────────────────────────────────────────────────────────────────────────


class FormBody(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["form"] = "form"
    fields: Pairs = ()

    @property
    def content_type(self) -> str:
        return FORM_CONTENT_TYPE

    def encode(self) -> bytes:
        return urlencode(self.fields).encode()


class JsonBody(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["json"] = "json"
    document: JsonDict

    @property
    def content_type(self) -> str:
        return JSON_CONTENT_TYPE

    def encode(self) -> bytes:
        return orjson.dumps(self.document)


class TextBody(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["text"] = "text"
    text: str

    @property
    def content_type(self) -> str:
        return TEXT_CONTENT_TYPE

    def encode(self) -> bytes:
        return self.text.encode()


Body = Annotated[FormBody | JsonBody | TextBody, Field(discriminator="kind")]


# ─────────────────────────────────────────────────────────────────────────────
# Request
# ─────────────────────────────────────────────────────────────────────────────


class RequestSpec(BaseModel):
    """One outbound HTTP call, immutable once built.

    Example:
        >>> spec = RequestSpec(path=endpoint("user", "thibault"), query=query(("trophies", True)))
        >>> spec.path, spec.query
        ('/user/thibault', (('trophies', 'true'),))
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: HttpMethod = HttpMethod.GET
    path: Annotated[str, Field(min_length=1)]
    query: Pairs = ()
    body: Body | None = None
    auth: AuthPolicy = AuthPolicy.BEARER
    extra_headers: Pairs = ()

    @field_validator("path")
    @classmethod
    def _absolute_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"path must start with '/': {v!r}")
        return v

    @property
    def content_type(self) -> str:
        """Body media type; JSON when there is no body."""
        return self.body.content_type if self.body is not None else JSON_CONTENT_TYPE

    def encode_body(self) -> bytes | None:
        return self.body.encode() if self.body is not None else None

    def headers(self, token: str | None = None) -> dict[str, str]:
        """Content-Type, then bearer auth, then builder overrides."""
        headers = {"Content-Type": self.content_type}
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        headers.update(self.extra_headers)
        return headers


# ─────────────────────────────────────────────────────────────────────────────
# Builder helpers
# ─────────────────────────────────────────────────────────────────────────────


def endpoint(*segments: object) -> str:
    """Join path segments, percent-encoding each one."""
    return "/" + "/".join(quote(str(s), safe="") for s in segments)


def encode_value(value: object) -> str:
    """Text form of a scalar query or form value."""
    match value:
        case bool(): return "true" if value else "false"
        case float() if value.is_integer(): return str(int(value))
        case _: return str(value)


def query(*pairs: tuple[str, object]) -> Pairs:
    """Ordered pairs with None values dropped."""
    return tuple((k, encode_value(v)) for k, v in pairs if v is not None)


def form(*pairs: tuple[str, object]) -> FormBody:
    return FormBody(fields=query(*pairs))


def json_body(document: JsonDict) -> JsonBody:
    """JSON body with top-level None entries dropped."""
    return JsonBody(document={k: v for k, v in document.items() if v is not None})


def text_body(text: str) -> TextBody:
    return TextBody(text=text)
