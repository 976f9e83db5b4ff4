"""Official broadcasts and relaying PGN into a round."""

from __future__ import annotations

from pydantic import Field

from ..gateway import FreeText, HttpMethod, Identifier, NoParams, RequestSpec, ToolParams, ToolSpec, endpoint, text_body
from .common import fmt

CATEGORY = "broadcasts"
ROUND_NOT_FOUND = fmt("Broadcast round {round_id} not found")


class BroadcastParams(ToolParams):
    broadcast_id: Identifier = Field(description="Broadcast tournament ID")


class RoundParams(BroadcastParams):
    round_id: Identifier = Field(description="Broadcast round ID")


class PushPgnParams(RoundParams):
    pgn: FreeText = Field(description="PGN games to push, separated by blank lines")


GET_OFFICIAL_BROADCASTS = ToolSpec.define(
    "get_official_broadcasts", "Get official broadcasts (TV shows)",
    action="get official broadcasts", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(path=endpoint("broadcast")),
)

GET_BROADCAST = ToolSpec.define(
    "get_broadcast", "Get a broadcast tournament by ID",
    action="get broadcast", category=CATEGORY, params=BroadcastParams,
    build=lambda p: RequestSpec(path=endpoint("broadcast", p.broadcast_id)),
    messages={404: fmt("Broadcast {broadcast_id} not found")},
)

GET_BROADCAST_ROUND = ToolSpec.define(
    "get_broadcast_round", "Get a broadcast round with its games",
    action="get broadcast round", category=CATEGORY, params=RoundParams,
    build=lambda p: RequestSpec(path=endpoint("broadcast", p.broadcast_id, p.round_id)),
    messages={404: ROUND_NOT_FOUND},
)

PUSH_BROADCAST_ROUND_PGN = ToolSpec.define(
    "push_broadcast_round_pgn", "Push PGN to a broadcast round",
    action="push PGN", category=CATEGORY, params=PushPgnParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST,
        path=endpoint("broadcast", p.broadcast_id, p.round_id, "push"),
        body=text_body(p.pgn),
    ),
    render=lambda p, _: f"Successfully pushed PGN to broadcast {p.broadcast_id} round {p.round_id}",
    messages={404: ROUND_NOT_FOUND, 401: "Missing authorization or insufficient permissions"},
)

TOOLS = (GET_OFFICIAL_BROADCASTS, GET_BROADCAST, GET_BROADCAST_ROUND, PUSH_BROADCAST_ROUND_PGN)
