"""Challenging players and answering challenges."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..gateway import (
    HttpMethod,
    NoParams,
    Number,
    NormalizedResult,
    RequestSpec,
    ToolParams,
    ToolSpec,
    endpoint,
    form,
    json_body,
)
from .common import ChallengeIdParams, UsernameParams, Variant, document, fmt

CATEGORY = "challenges"
CHALLENGE_NOT_FOUND = fmt("Challenge {challenge_id} not found")

DeclineReason = Literal[
    "generic", "later", "tooFast", "tooSlow", "timeControl", "rated",
    "casual", "standard", "variant", "noBot", "onlyBot",
]


class ChallengeClock(ToolParams):
    limit: Number = Field(ge=0, description="Clock initial time in minutes")
    increment: Number = Field(ge=0, description="Clock increment in seconds")


class CreateChallengeParams(UsernameParams):
    rated: bool | None = Field(default=None, description="Whether the game is rated (server default: false)")
    clock: ChallengeClock | None = Field(default=None, description="Clock settings")
    days: int | None = Field(default=None, ge=1, description="Days per turn for correspondence games")
    color: Literal["random", "white", "black"] | None = Field(default=None, description="Color to play")
    variant: Variant | None = Field(default=None, description="Game variant (server default: standard)")
    fen: str | None = Field(default=None, description="Custom initial position in FEN format")


class DeclineChallengeParams(ChallengeIdParams):
    reason: DeclineReason = Field(default="generic", description="Reason for declining the challenge")


def _create_request(p: CreateChallengeParams) -> RequestSpec:
    clock = p.clock
    return RequestSpec(
        method=HttpMethod.POST,
        path=endpoint("challenge", p.username),
        body=form(
            ("rated", p.rated),
            ("color", p.color),
            ("variant", p.variant),
            ("clock.limit", round(clock.limit * 60) if clock else None),
            ("clock.increment", clock.increment if clock else None),
            ("days", p.days),
            ("fen", p.fen or None),
        ),
    )


def _render_created(p: CreateChallengeParams, result: NormalizedResult) -> str:
    doc = document("create_challenge", result)
    challenge = doc.get("challenge")
    url = challenge.get("url") if isinstance(challenge, dict) else doc.get("url")
    return f"Challenge created: {url}"


def _answer(verb: str, description: str, done: str) -> ToolSpec:
    return ToolSpec.define(
        f"{verb}_challenge", description,
        action=f"{verb} challenge", category=CATEGORY, params=ChallengeIdParams,
        build=lambda p: RequestSpec(method=HttpMethod.POST, path=endpoint("challenge", p.challenge_id, verb)),
        render=lambda p, _: f"Challenge {p.challenge_id} {done}",
        messages={404: CHALLENGE_NOT_FOUND, 400: f"Challenge cannot be {done}"},
    )


LIST_CHALLENGES = ToolSpec.define(
    "list_challenges", "List incoming and outgoing challenges",
    action="list challenges", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(path=endpoint("challenge")),
)

CREATE_CHALLENGE = ToolSpec.define(
    "create_challenge", "Challenge another player",
    action="create challenge", category=CATEGORY, params=CreateChallengeParams,
    build=_create_request, render=_render_created,
    messages={404: fmt("User {username} not found")},
)

ACCEPT_CHALLENGE = _answer("accept", "Accept an incoming challenge", "accepted")
CANCEL_CHALLENGE = _answer("cancel", "Cancel an outgoing challenge", "cancelled")

DECLINE_CHALLENGE = ToolSpec.define(
    "decline_challenge", "Decline an incoming challenge",
    action="decline challenge", category=CATEGORY, params=DeclineChallengeParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST,
        path=endpoint("challenge", p.challenge_id, "decline"),
        body=json_body({"reason": p.reason}),
    ),
    render=lambda p, _: f"Challenge {p.challenge_id} declined",
    messages={404: CHALLENGE_NOT_FOUND, 400: "Challenge cannot be declined"},
)

TOOLS = (LIST_CHALLENGES, CREATE_CHALLENGE, ACCEPT_CHALLENGE, DECLINE_CHALLENGE, CANCEL_CHALLENGE)
