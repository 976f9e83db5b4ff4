"""Response-side data: raw HTTP outcome and the normalized result variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

import orjson

from ..foundation.errors import JsonValue

PGN_MEDIA_TYPES = frozenset({"application/x-chess-pgn", "application/vnd.chess-pgn"})
NDJSON_MEDIA_TYPES = frozenset({"application/x-ndjson", "application/ndjson", "application/jsonl"})


class ContentKind(StrEnum):
    """Decoding strategy implied by a response's declared media type."""
    PGN = "pgn"
    NDJSON = "ndjson"
    JSON = "json"

    @classmethod
    def from_media_type(cls, media_type: str | None) -> ContentKind:
        """PGN and NDJSON media types map to their kinds; everything else is JSON."""
        if media_type in PGN_MEDIA_TYPES:
            return cls.PGN
        if media_type in NDJSON_MEDIA_TYPES:
            return cls.NDJSON
        return cls.JSON


def media_type_of(content_type: str | None) -> str | None:
    """'application/json; charset=utf-8' -> 'application/json'"""
    if not content_type:
        return None
    return content_type.split(";")[0].strip().lower() or None


@dataclass(frozen=True, slots=True)
class RawResponse:
    status: int
    reason: str
    media_type: str | None
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def content_kind(self) -> ContentKind:
        return ContentKind.from_media_type(self.media_type)


# ─────────────────────────────────────────────────────────────────────────────
# Normalized results
# ─────────────────────────────────────────────────────────────────────────────


def _indent(document: JsonValue) -> str:
    return orjson.dumps(document, option=orjson.OPT_INDENT_2).decode()


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text, passed through verbatim."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Json:
    """One decoded JSON document."""

    document: JsonValue

    def render(self) -> str:
        return _indent(self.document)


@dataclass(frozen=True, slots=True)
class RecordStream:
    """Ordered JSON records decoded from an NDJSON body."""

    records: tuple[JsonValue, ...]

    def render(self) -> str:
        return _indent(list(self.records))

    def __len__(self) -> int:
        return len(self.records)


NormalizedResult = Text | Json | RecordStream
