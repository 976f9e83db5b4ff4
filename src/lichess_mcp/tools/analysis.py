"""Cloud evaluation and FIDE player lookup."""

from __future__ import annotations

from pydantic import Field

from ..gateway import FreeText, Identifier, RequestSpec, ToolParams, ToolSpec, endpoint, query
from .common import fmt

CATEGORY = "analysis"


class CloudEvalParams(ToolParams):
    fen: FreeText = Field(description="FEN of the position to evaluate")
    multi_pv: int = Field(default=1, ge=1, le=5, description="Number of principal variations (1-5)")


class FidePlayerParams(ToolParams):
    player_id: Identifier = Field(description="FIDE player ID")


class FideSearchParams(ToolParams):
    name: FreeText = Field(description="Player name to search for")


GET_CLOUD_EVAL = ToolSpec.define(
    "get_cloud_eval", "Get cloud evaluation for a position",
    action="get cloud evaluation", category=CATEGORY, params=CloudEvalParams,
    build=lambda p: RequestSpec(path=endpoint("cloud-eval"), query=query(("fen", p.fen), ("multiPv", p.multi_pv))),
    messages={404: "Position not found in cloud database"},
)

GET_FIDE_PLAYER = ToolSpec.define(
    "get_fide_player", "Get FIDE player information",
    action="get FIDE player info", category=CATEGORY, params=FidePlayerParams,
    build=lambda p: RequestSpec(path=endpoint("fide", "player", p.player_id)),
    messages={404: fmt("FIDE player {player_id} not found")},
)

SEARCH_FIDE_PLAYERS = ToolSpec.define(
    "search_fide_players", "Search for FIDE players by name",
    action="search FIDE players", category=CATEGORY, params=FideSearchParams,
    build=lambda p: RequestSpec(path=endpoint("fide", "player"), query=query(("q", p.name))),
)

TOOLS = (GET_CLOUD_EVAL, GET_FIDE_PLAYER, SEARCH_FIDE_PLAYERS)
