"""Playing games with the Board API."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..gateway import FreeText, HttpMethod, Identifier, RequestSpec, ToolSpec, endpoint, json_body, query
from .common import GameIdParams, fmt

CATEGORY = "board"
GAME_NOT_FOUND = fmt("Game {game_id} not found")


class MoveParams(GameIdParams):
    move: Identifier = Field(description="Move in UCI format (e.g., e2e4)")
    offering_draw: bool = Field(default=False, description="Whether to offer (or agree to) a draw")


class ChatParams(GameIdParams):
    room: Literal["player", "spectator"] = Field(description="Chat room")
    text: FreeText = Field(description="Message text")


class DrawParams(GameIdParams):
    accept: bool = Field(default=True, description="Accept (true) or decline (false) the draw offer")


def _move_request(p: MoveParams) -> RequestSpec:
    return RequestSpec(
        method=HttpMethod.POST,
        path=endpoint("board", "game", p.game_id, "move", p.move),
        query=query(("offeringDraw", True if p.offering_draw else None)),
    )


def _render_move(p: MoveParams, _: object) -> str:
    return f"Move {p.move} made in game {p.game_id}" + (" with draw offer" if p.offering_draw else "")


def _game_action(name: str, description: str, segment: str, action: str, done: str, rejected: str) -> ToolSpec:
    """POST /board/game/{id}/{segment}; `done` is formatted with the game id."""
    return ToolSpec.define(
        name, description,
        action=action, category=CATEGORY, params=GameIdParams,
        build=lambda p: RequestSpec(method=HttpMethod.POST, path=endpoint("board", "game", p.game_id, segment)),
        render=lambda p, _: done.format(game_id=p.game_id),
        messages={404: GAME_NOT_FOUND, 400: rejected},
    )


MAKE_MOVE = ToolSpec.define(
    "make_move", "Make a move in an ongoing game",
    action="make move", category=CATEGORY, params=MoveParams,
    build=_move_request, render=_render_move,
    messages={404: GAME_NOT_FOUND},
)

MAKE_BOARD_MOVE = ToolSpec.define(
    "make_board_move", "Make a move in a board game",
    action="make move", category=CATEGORY, params=MoveParams,
    build=_move_request, render=_render_move,
    messages={404: GAME_NOT_FOUND, 400: "Invalid move"},
)

ABORT_BOARD_GAME = _game_action(
    "abort_board_game", "Abort a board game", "abort", "abort game",
    "Game {game_id} aborted", "Game cannot be aborted",
)
RESIGN_BOARD_GAME = _game_action(
    "resign_board_game", "Resign a board game", "resign", "resign game",
    "Resigned game {game_id}", "Game cannot be resigned",
)
CLAIM_VICTORY = _game_action(
    "claim_victory", "Claim victory if opponent abandoned the game", "claim-victory", "claim victory",
    "Victory claimed for game {game_id}", "Victory cannot be claimed",
)

WRITE_IN_CHAT = ToolSpec.define(
    "write_in_chat", "Write in the chat of a board game",
    action="send message", category=CATEGORY, params=ChatParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST,
        path=endpoint("board", "game", p.game_id, "chat"),
        body=json_body({"room": p.room, "text": p.text}),
    ),
    render=lambda p, _: f"Message sent to {p.room} chat in game {p.game_id}",
    messages={404: GAME_NOT_FOUND, 400: "Invalid chat message"},
)

HANDLE_DRAW_BOARD_GAME = ToolSpec.define(
    "handle_draw_board_game", "Handle draw offers for a board game",
    action="handle draw offer", category=CATEGORY, params=DrawParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST,
        path=endpoint("board", "game", p.game_id, "draw", "yes" if p.accept else "no"),
    ),
    render=lambda p, _: f"Draw offer {'accepted' if p.accept else 'declined'} for game {p.game_id}",
    messages={404: GAME_NOT_FOUND, 400: "No draw offer to handle"},
)

TOOLS = (
    MAKE_MOVE, MAKE_BOARD_MOVE, ABORT_BOARD_GAME, RESIGN_BOARD_GAME,
    WRITE_IN_CHAT, HANDLE_DRAW_BOARD_GAME, CLAIM_VICTORY,
)
