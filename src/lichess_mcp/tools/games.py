"""Game export and Lichess TV.

Exports come back as PGN by default; the optional `format` argument asks
for JSON (single game) or NDJSON (game lists) through the Accept header.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from ..gateway import (
    ContentKind,
    FixedId,
    HttpMethod,
    NoParams,
    RequestSpec,
    Timestamp,
    ToolParams,
    ToolSpec,
    endpoint,
    text_body,
)
from ..gateway.validation import id_list
from .common import Color, ExportFormat, PerfTypeOrCorrespondence, UsernameParams, accept, flag, fmt

CATEGORY = "games"
GameIds = id_list(300)

TvChannel = Literal[
    "bot", "blitz", "racingKings", "ultraBullet", "bullet", "classical", "threeCheck", "antichess",
    "computer", "horde", "rapid", "atomic", "crazyhouse", "chess960", "kingOfTheHill", "best",
]

# Query order for single-game exports
_GAME_FLAGS = ("moves", "pgn_in_json", "tags", "clocks", "evals", "accuracy", "opening", "literate")


class ExportFlags(ToolParams):
    moves: bool | None = flag("Include the PGN moves (server default: true)")
    pgn_in_json: bool | None = flag("Include the full PGN within the JSON response (server default: false)")
    tags: bool | None = flag("Include the PGN tags (server default: true)")
    clocks: bool | None = flag("Include clock comments in the PGN moves (server default: false)")
    evals: bool | None = flag("Include analysis evaluation comments (server default: false)")
    opening: bool | None = flag("Include the opening name (server default: false)")
    format: ExportFormat | None = Field(default=None, description="Response encoding: pgn, json or ndjson")


class ExportGameParams(ExportFlags):
    game_id: FixedId = Field(description="The game ID (8 characters)")
    accuracy: bool | None = flag("Include accuracy percent of each player (server default: false)")
    literate: bool | None = flag("Insert textual annotations in the PGN (server default: false)")


class ExportOngoingParams(ExportFlags, UsernameParams):
    pass


class ExportUserGamesParams(ExportFlags, UsernameParams):
    since: Timestamp | None = Field(default=None, description="Download games played since this timestamp (ms)")
    until: Timestamp | None = Field(default=None, description="Download games played until this timestamp (ms)")
    max: int | None = Field(default=None, ge=1, description="How many games to download")
    vs: str | None = Field(default=None, description="Only games played against this opponent")
    rated: bool | None = flag("Only rated (true) or casual (false) games")
    perf_type: PerfTypeOrCorrespondence | None = Field(default=None, description="Only games in this speed or variant")
    color: Color | None = Field(default=None, description="Only games played as this color")
    analysed: bool | None = flag("Only games with or without a computer analysis")
    accuracy: bool | None = flag("Include accuracy percent of each player (server default: false)")
    ongoing: bool | None = flag("Include ongoing games (server default: false)")
    finished: bool | None = flag("Include finished games (server default: true)")
    literate: bool | None = flag("Insert textual annotations in the PGN (server default: false)")
    last_fen: bool | None = flag("Include the FEN notation of the last position (server default: false)")
    sort: Literal["dateAsc", "dateDesc"] | None = Field(default=None, description="Sort order (server default: dateDesc)")
    format: Literal["pgn", "ndjson"] | None = Field(default=None, description="Response encoding: pgn or ndjson")

    @model_validator(mode="after")
    def _window(self) -> ExportUserGamesParams:
        if self.since is not None and self.until is not None and self.since > self.until:
            raise ValueError("since must not be later than until")
        return self


class ExportByIdsParams(ExportFlags):
    ids: GameIds = Field(description="Game IDs separated by commas. Up to 300 IDs.")


class TvGameParams(ToolParams):
    channel: TvChannel | None = Field(default=None, description="TV channel; the top rated game when omitted")


EXPORT_GAME = ToolSpec.define(
    "export_game", "Export one game in PGN or JSON format",
    action="export game", category=CATEGORY, params=ExportGameParams,
    build=lambda p: RequestSpec(
        path=endpoint("game", "export", p.game_id),
        query=p.pairs(*_GAME_FLAGS),
        extra_headers=accept(p.format),
    ),
    messages={404: fmt("Game {game_id} not found")},
)

EXPORT_ONGOING_GAME = ToolSpec.define(
    "export_ongoing_game", "Export ongoing game of a user",
    action="export ongoing game", category=CATEGORY, params=ExportOngoingParams,
    build=lambda p: RequestSpec(
        path=endpoint("user", p.username, "current-game"),
        query=p.pairs("moves", "pgn_in_json", "tags", "clocks", "evals", "opening"),
        extra_headers=accept(p.format),
    ),
    messages={404: fmt("User {username} not found or has no ongoing game")},
)

EXPORT_USER_GAMES = ToolSpec.define(
    "export_user_games", "Export all games of a user",
    action="export games", category=CATEGORY, params=ExportUserGamesParams,
    build=lambda p: RequestSpec(
        path=endpoint("games", "user", p.username),
        query=p.pairs(
            "since", "until", "max", "vs", "rated", "perf_type", "color", "analysed",
            *_GAME_FLAGS[:-1], "ongoing", "finished", "literate", "last_fen", "sort",
        ),
        extra_headers=accept(p.format),
    ),
    messages={404: fmt("User {username} not found")},
    accepts=frozenset({ContentKind.PGN, ContentKind.NDJSON}),
)

EXPORT_GAMES_BY_IDS = ToolSpec.define(
    "export_games_by_ids", "Export multiple games by IDs",
    action="export games", category=CATEGORY, params=ExportByIdsParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST,
        path=endpoint("games", "export", "_ids"),
        query=p.pairs("moves", "pgn_in_json", "tags", "clocks", "evals", "opening"),
        body=text_body(p.ids),
        extra_headers=accept(p.format),
    ),
)

GET_TV_CHANNELS = ToolSpec.define(
    "get_tv_channels", "Get all TV channels and their current games",
    action="get TV channels", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(path=endpoint("tv", "channels")),
)

GET_TV_GAME = ToolSpec.define(
    "get_tv_game", "Get current TV game in PGN format",
    action="get TV game", category=CATEGORY, params=TvGameParams,
    build=lambda p: RequestSpec(path=endpoint("tv", p.channel) if p.channel else endpoint("tv")),
)

TOOLS = (
    EXPORT_GAME, EXPORT_ONGOING_GAME, EXPORT_USER_GAMES, EXPORT_GAMES_BY_IDS,
    GET_TV_CHANNELS, GET_TV_GAME,
)
