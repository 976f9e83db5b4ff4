"""Argument validation for tool invocations.

Each tool declares a ToolParams model; validate_arguments() runs it against
the raw argument mapping and turns pydantic's errors into one
VALIDATION_ERROR naming the offending fields. Defaults fill omitted fields
before any constraint is checked.

Reusable constraint types:
    Identifier   non-empty after trimming, trimmed value forwarded
    FreeText     non-empty after trimming, original value forwarded
    FixedId      exact 8-character identifier
    id_list(n)   comma-separated list of at most n items
"""

from __future__ import annotations

from typing import Annotated, Any, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError,
)
from pydantic.alias_generators import to_camel
from pydantic_core import ErrorDetails

from ..foundation.errors import ErrorCode, ToolException
from .request import Pairs, encode_value

P = TypeVar("P", bound="ToolParams")

# Earliest game timestamp Lichess accepts for since/until filters (ms)
LICHESS_EPOCH_MS = 1356998400070


# ─────────────────────────────────────────────────────────────────────────────
# Constraint primitives
# ─────────────────────────────────────────────────────────────────────────────


def _require_text(v: str) -> str:
    if not v.strip():
        raise ValueError("cannot be empty")
    return v


def _exact_length(n: int):
    def check(v: str) -> str:
        if len(v) != n:
            raise ValueError(f"must be exactly {n} characters long")
        return v
    return check


def _id_list_validator(limit: int):
    def check(v: str) -> str:
        items = [item for item in v.split(",") if item.strip()]
        if not items:
            raise ValueError("must list at least one ID")
        if len(items) > limit:
            raise ValueError(f"accepts at most {limit} comma-separated IDs, got {len(items)}")
        return v
    return check


Identifier = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
FreeText = Annotated[str, AfterValidator(_require_text)]
FixedId = Annotated[str, StringConstraints(strip_whitespace=True), AfterValidator(_exact_length(8))]
Timestamp = Annotated[int, Field(ge=LICHESS_EPOCH_MS)]
Number = int | float


def id_list(limit: int) -> Any:
    """Comma-separated identifiers, trimmed, at most `limit` entries."""
    return Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1), AfterValidator(_id_list_validator(limit)),
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Params base
# ─────────────────────────────────────────────────────────────────────────────


class ToolParams(BaseModel):
    """Base for per-tool argument models.

    Field names are snake_case; callers use the camelCase aliases. Unknown
    arguments are ignored, numbers are accepted where strings are expected.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        validate_default=True,
    )

    def pairs(self, *names: str) -> Pairs:
        """Encode the named fields as (alias, text) pairs in the given order, skipping unset ones."""
        fields = type(self).model_fields
        out: list[tuple[str, str]] = []
        for name in names:
            value = getattr(self, name)
            if value is not None:
                out.append((fields[name].alias or name, encode_value(value)))
        return tuple(out)

    def present(self, *names: str) -> dict[str, Any]:
        """Alias -> value for the named fields that are set, nested models dumped by alias."""
        return self.model_dump(by_alias=True, include=set(names), exclude_none=True)


class NoParams(ToolParams):
    """Tools without arguments."""


def validate_arguments(tool_name: str, model: type[P], arguments: dict[str, Any] | None) -> P:
    """Validate `arguments` against `model`.

    Raises:
        ToolException: VALIDATION_ERROR listing every failed field.
    """
    try:
        return model.model_validate(arguments or {})
    except ValidationError as e:
        details = "; ".join(describe_error(err) for err in e.errors(include_url=False))
        raise ToolException.create(
            tool_name, f"Invalid arguments for {tool_name}: {details}", ErrorCode.VALIDATION_ERROR,
        ) from e


def describe_error(err: ErrorDetails) -> str:
    """One readable sentence for a pydantic error entry."""
    field = ".".join(str(part) for part in err["loc"])
    ctx = err.get("ctx") or {}
    match err["type"]:
        case "missing":
            reason = "is required"
        case "string_too_short" if ctx.get("min_length") == 1:
            reason = "cannot be empty"
        case "greater_than_equal":
            reason = f"must be at least {ctx['ge']}"
        case "less_than_equal":
            reason = f"must not exceed {ctx['le']}"
        case "literal_error" | "enum":
            reason = f"must be one of: {ctx.get('expected', '')}"
        case "value_error":
            reason = str(ctx.get("error", err["msg"]))
        case _:
            reason = err["msg"][:1].lower() + err["msg"][1:]
    return f"{field} {reason}" if field else reason
