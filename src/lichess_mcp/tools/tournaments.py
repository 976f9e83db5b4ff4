"""Arena and Swiss tournaments.

Both families share the same join/withdraw shape; only the path root and
the wording of the 404 differ.
"""

from __future__ import annotations

from pydantic import Field, model_validator

from ..foundation.errors import JsonDict
from ..gateway import (
    HttpMethod,
    Identifier,
    NoParams,
    Number,
    RequestSpec,
    ToolParams,
    ToolSpec,
    endpoint,
    json_body,
)
from .common import SwissIdParams, TournamentIdParams, Variant, accept, flag, fmt, membership

CATEGORY = "tournaments"

ARENA_NOT_FOUND = fmt("Tournament {tournament_id} not found")
SWISS_NOT_FOUND = fmt("Swiss tournament {swiss_id} not found")


# ─────────────────────────────────────────────────────────────────────────────
# Params
# ─────────────────────────────────────────────────────────────────────────────


class CreateArenaParams(ToolParams):
    name: Identifier = Field(description="Name of the tournament")
    clock_time: Number = Field(default=3, ge=0, description="Clock initial time in minutes")
    clock_increment: Number = Field(default=2, ge=0, description="Clock increment in seconds")
    minutes: int = Field(default=45, ge=1, description="Tournament duration in minutes")
    wait_minutes: int = Field(default=5, ge=1, description="Time before tournament starts, in minutes")
    start_date: int | None = Field(default=None, ge=0, description="Timestamp to start the tournament at a given date")
    variant: Variant = Field(default="standard", description="Variant key")
    rated: bool = Field(default=True, description="Whether the tournament is rated")
    position: str | None = Field(default=None, description="Custom initial position in FEN format")
    berserkable: bool = Field(default=True, description="Whether players can use berserk")
    streakable: bool = Field(default=True, description="Whether players can get streaks")
    has_chat: bool = Field(default=True, description="Whether players can discuss in a chat")
    description: str | None = Field(default=None, description="Tournament description (HTML)")
    conditions: JsonDict | None = Field(
        default=None,
        description="Participation restrictions (minRating, maxRating, nbRatedGame, teamMember, ...), sent as given",
    )


def _arena_body(p: CreateArenaParams) -> JsonDict:
    """Settings by alias, with `conditions` forwarded exactly as the caller sent it."""
    body = p.model_dump(by_alias=True, exclude_none=True, exclude={"conditions"})
    if p.conditions is not None:
        body["conditions"] = p.conditions
    return body


class ArenaResultsParams(TournamentIdParams):
    nb: int | None = Field(default=None, ge=1, description="Max number of players to fetch")
    sheet: bool | None = flag("Add a sheet field to each player, containing their scores")


class SwissClock(ToolParams):
    limit: Number | None = Field(default=None, ge=0, description="Clock initial time in seconds")
    increment: Number | None = Field(default=None, ge=0, description="Clock increment in seconds")


class CreateSwissParams(ToolParams):
    team_id: Identifier = Field(description="ID of the team hosting the tournament")
    name: Identifier = Field(description="Name of the tournament")
    clock: SwissClock = Field(description="Clock settings")
    nb_rounds: int = Field(default=7, ge=1, description="Number of rounds to play")
    rated: bool = Field(default=True, description="Whether the tournament is rated")
    variant: Variant = Field(default="standard", description="Variant key")
    description: str | None = Field(default=None, description="Tournament description")
    round_interval: int = Field(default=300, ge=1, description="Seconds between rounds")

    @model_validator(mode="after")
    def _complete_clock(self) -> CreateSwissParams:
        if self.clock.limit is None or self.clock.increment is None:
            raise ValueError("clock must specify both limit and increment")
        return self


class SwissGamesParams(SwissIdParams):
    player: str | None = Field(default=None, description="Only games of this player")
    moves: bool | None = flag("Include the PGN moves")
    pgn_in_json: bool | None = flag("Include the full PGN within the JSON response")
    tags: bool | None = flag("Include the PGN tags")
    clocks: bool | None = flag("Include clock comments in the PGN moves")
    evals: bool | None = flag("Include analysis evaluation comments")
    opening: bool | None = flag("Include the opening name")


# ─────────────────────────────────────────────────────────────────────────────
# Arena
# ─────────────────────────────────────────────────────────────────────────────


GET_ARENA_TOURNAMENTS = ToolSpec.define(
    "get_arena_tournaments", "Get current tournaments",
    action="get tournaments", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(path=endpoint("tournament")),
)

CREATE_ARENA = ToolSpec.define(
    "create_arena", "Create a new arena tournament",
    action="create tournament", category=CATEGORY, params=CreateArenaParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST,
        path=endpoint("tournament"),
        body=json_body(_arena_body(p)),
    ),
    messages={400: "Invalid tournament parameters"},
)

GET_ARENA_INFO = ToolSpec.define(
    "get_arena_info", "Get info about an arena tournament",
    action="get tournament info", category=CATEGORY, params=TournamentIdParams,
    build=lambda p: RequestSpec(path=endpoint("tournament", p.tournament_id)),
    messages={404: ARENA_NOT_FOUND},
)

GET_ARENA_GAMES = ToolSpec.define(
    "get_arena_games", "Get games of an arena tournament",
    action="get tournament games", category=CATEGORY, params=TournamentIdParams,
    build=lambda p: RequestSpec(path=endpoint("tournament", p.tournament_id, "games")),
    messages={404: ARENA_NOT_FOUND},
)

GET_ARENA_RESULTS = ToolSpec.define(
    "get_arena_results", "Get results of an arena tournament",
    action="get tournament results", category=CATEGORY, params=ArenaResultsParams,
    build=lambda p: RequestSpec(path=endpoint("tournament", p.tournament_id, "results"), query=p.pairs("nb", "sheet")),
    messages={404: ARENA_NOT_FOUND},
)

GET_TEAM_BATTLE_RESULTS = ToolSpec.define(
    "get_team_battle_results", "Get results of a team battle tournament",
    action="get team battle results", category=CATEGORY, params=TournamentIdParams,
    build=lambda p: RequestSpec(path=endpoint("tournament", p.tournament_id, "teams")),
    messages={404: ARENA_NOT_FOUND},
)

JOIN_ARENA = membership(
    "join_arena", "Join an arena tournament",
    category=CATEGORY, params=TournamentIdParams, root="tournament", key="tournament_id",
    verb="join", label="tournament", target="tournament", not_found=ARENA_NOT_FOUND,
)
WITHDRAW_FROM_ARENA = membership(
    "withdraw_from_arena", "Withdraw from an arena tournament",
    category=CATEGORY, params=TournamentIdParams, root="tournament", key="tournament_id",
    verb="withdraw", label="tournament", target="tournament", not_found=ARENA_NOT_FOUND,
)


# ─────────────────────────────────────────────────────────────────────────────
# Swiss
# ─────────────────────────────────────────────────────────────────────────────


CREATE_SWISS = ToolSpec.define(
    "create_swiss", "Create a new Swiss tournament",
    action="create Swiss tournament", category=CATEGORY, params=CreateSwissParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST,
        path=endpoint("swiss", "new"),
        body=json_body(p.model_dump(by_alias=True, exclude_none=True)),
    ),
    messages={404: "Team not found", 403: "You are not allowed to create tournaments for this team"},
)

GET_SWISS_INFO = ToolSpec.define(
    "get_swiss_info", "Get info about a Swiss tournament",
    action="get Swiss tournament info", category=CATEGORY, params=SwissIdParams,
    build=lambda p: RequestSpec(path=endpoint("swiss", p.swiss_id)),
    messages={404: SWISS_NOT_FOUND},
)

GET_SWISS_GAMES = ToolSpec.define(
    "get_swiss_games", "Get games of a Swiss tournament",
    action="get Swiss tournament games", category=CATEGORY, params=SwissGamesParams,
    build=lambda p: RequestSpec(
        path=endpoint("swiss", p.swiss_id, "games"),
        query=p.pairs("player", "moves", "pgn_in_json", "tags", "clocks", "evals", "opening"),
        extra_headers=accept("ndjson"),
    ),
    messages={404: SWISS_NOT_FOUND},
)

GET_SWISS_RESULTS = ToolSpec.define(
    "get_swiss_results", "Get results of a Swiss tournament",
    action="get Swiss tournament results", category=CATEGORY, params=SwissIdParams,
    build=lambda p: RequestSpec(path=endpoint("swiss", p.swiss_id, "results")),
    messages={404: SWISS_NOT_FOUND},
)

JOIN_SWISS = membership(
    "join_swiss", "Join a Swiss tournament",
    category=CATEGORY, params=SwissIdParams, root="swiss", key="swiss_id",
    verb="join", label="Swiss tournament", target="tournament", not_found=SWISS_NOT_FOUND,
)
WITHDRAW_FROM_SWISS = membership(
    "withdraw_from_swiss", "Withdraw from a Swiss tournament",
    category=CATEGORY, params=SwissIdParams, root="swiss", key="swiss_id",
    verb="withdraw", label="Swiss tournament", target="tournament", not_found=SWISS_NOT_FOUND,
)

TOOLS = (
    GET_ARENA_TOURNAMENTS, CREATE_ARENA, GET_ARENA_INFO, GET_ARENA_GAMES, GET_ARENA_RESULTS,
    JOIN_ARENA, WITHDRAW_FROM_ARENA, GET_TEAM_BATTLE_RESULTS,
    CREATE_SWISS, GET_SWISS_INFO, GET_SWISS_GAMES, GET_SWISS_RESULTS, JOIN_SWISS, WITHDRAW_FROM_SWISS,
)
