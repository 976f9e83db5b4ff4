"""Shared vocabularies and helpers for the tool modules."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from pydantic import Field

from ..foundation.errors import ErrorCode, JsonDict, ToolException
from ..gateway import (
    HttpMethod,
    Identifier,
    Json,
    NormalizedResult,
    RequestSpec,
    StatusMessage,
    ToolParams,
    ToolSpec,
    endpoint,
)
from ..gateway.request import Pairs

Variant = Literal[
    "standard", "chess960", "crazyhouse", "antichess", "atomic",
    "horde", "kingOfTheHill", "racingKings", "threeCheck",
]
PerfType = Literal[
    "ultraBullet", "bullet", "blitz", "rapid", "classical", "chess960", "crazyhouse",
    "antichess", "atomic", "horde", "kingOfTheHill", "racingKings", "threeCheck",
]
PerfTypeOrCorrespondence = Literal[
    "ultraBullet", "bullet", "blitz", "rapid", "classical", "correspondence", "chess960",
    "crazyhouse", "antichess", "atomic", "horde", "kingOfTheHill", "racingKings", "threeCheck",
]
Color = Literal["white", "black"]
ExportFormat = Literal["pgn", "json", "ndjson"]

MEDIA_TYPES: dict[str, str] = {
    "pgn": "application/x-chess-pgn",
    "json": "application/json",
    "ndjson": "application/x-ndjson",
}

INVALID_RESPONSE = "Invalid response format from Lichess API"


def accept(fmt: ExportFormat | None) -> Pairs:
    """Accept header selecting the export encoding, empty when the server default is wanted."""
    return (("Accept", MEDIA_TYPES[fmt]),) if fmt else ()


def fmt(template: str) -> Callable[[ToolParams], str]:
    """Status message built from the validated params by field name."""
    return lambda p: template.format(**p.model_dump())


def flag(description: str) -> Any:
    """Optional boolean forwarded only when the caller sets it."""
    return Field(default=None, description=description)


def document(tool_name: str, result: NormalizedResult) -> JsonDict:
    """The JSON object a renderer expects, or PARSE_ERROR."""
    if isinstance(result, Json) and isinstance(result.document, dict):
        return result.document
    raise ToolException.create(tool_name, INVALID_RESPONSE, ErrorCode.PARSE_ERROR)


# ─────────────────────────────────────────────────────────────────────────────
# Params shared by several tools
# ─────────────────────────────────────────────────────────────────────────────


class UsernameParams(ToolParams):
    username: Identifier = Field(description="Username")


class GameIdParams(ToolParams):
    game_id: Identifier = Field(description="Game ID")


class TeamIdParams(ToolParams):
    team_id: Identifier = Field(description="Team ID")


class TeamUserParams(ToolParams):
    team_id: Identifier = Field(description="Team ID")
    user_id: Identifier = Field(description="User ID")


class ChallengeIdParams(ToolParams):
    challenge_id: Identifier = Field(description="Challenge ID")


class TournamentIdParams(ToolParams):
    tournament_id: Identifier = Field(description="Tournament ID")


class SwissIdParams(ToolParams):
    swiss_id: Identifier = Field(description="Swiss tournament ID")


class SimulIdParams(ToolParams):
    simul_id: Identifier = Field(description="Simul ID")


# ─────────────────────────────────────────────────────────────────────────────
# Join / withdraw
# ─────────────────────────────────────────────────────────────────────────────


def membership(
    name: str,
    description: str,
    *,
    category: str,
    params: type[ToolParams],
    root: str,
    key: str,
    verb: Literal["join", "withdraw"],
    label: str,
    target: str,
    not_found: StatusMessage,
) -> ToolSpec:
    """POST /<root>/{id}/<verb> for events the user enters or leaves.

    `label` names the event in the action and confirmation ("Swiss
    tournament"), `target` names it in the 403/400 texts ("tournament").
    """
    phrase, past = ("join", "joined") if verb == "join" else ("withdraw from", "withdrew from")
    return ToolSpec.define(
        name, description,
        action=f"{phrase} {label}", category=category, params=params,
        build=lambda p: RequestSpec(method=HttpMethod.POST, path=endpoint(root, getattr(p, key), verb)),
        render=lambda p, _: f"Successfully {past} {label} {getattr(p, key)}",
        messages={
            404: not_found,
            403: f"You are not allowed to {phrase} this {target}",
            400: f"Cannot {phrase} this {target}",
        },
    )
