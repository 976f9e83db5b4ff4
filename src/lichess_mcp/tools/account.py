"""Account, token and timeline tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from ..foundation.errors import ErrorCode, ToolException
from ..gateway import (
    AuthPolicy,
    HttpMethod,
    Identifier,
    NoParams,
    NormalizedResult,
    RequestSpec,
    ToolParams,
    ToolSpec,
    endpoint,
    query,
    text_body,
)
from ..gateway.validation import id_list
from .common import UsernameParams, document, fmt

if TYPE_CHECKING:
    from ..gateway import Dispatcher

CATEGORY = "account"
TokenList = id_list(1000)


class SetTokenParams(ToolParams):
    token: Identifier = Field(description="Your Lichess API token")


class UserProfileParams(UsernameParams):
    trophies: bool = Field(default=False, description="Include user trophies")


class SetKidModeParams(ToolParams):
    value: bool = Field(description="Enable or disable kid mode")


class TimelineParams(ToolParams):
    since: int | None = Field(default=None, ge=0, description="Show events since this timestamp")
    nb: int = Field(default=15, ge=1, le=30, description="Max number of events to fetch (1-30)")


class OngoingGamesParams(ToolParams):
    nb: int = Field(default=9, ge=1, le=50, description="Max number of games to fetch (1-50)")


class TestTokensParams(ToolParams):
    tokens: TokenList = Field(description="OAuth tokens separated by commas. Up to 1000.")


# ─────────────────────────────────────────────────────────────────────────────
# Credential tools
# ─────────────────────────────────────────────────────────────────────────────


async def _set_token(dispatcher: Dispatcher, params: SetTokenParams) -> str:
    dispatcher.store.set(params.token)
    return "Lichess API token has been set"


async def _revoke_token(dispatcher: Dispatcher, params: NoParams) -> str:
    """Revoke the stored token remotely, then forget it.

    The header carries a snapshot of the token, so a set_token racing this
    call is neither revoked nor cleared.
    """
    token = dispatcher.store.get()
    if token is None:
        raise ToolException.create(
            REVOKE_TOKEN.name,
            "No token set to revoke. Please set a token first using set_token.",
            ErrorCode.MISSING_CREDENTIAL,
        )
    request = RequestSpec(
        method=HttpMethod.DELETE,
        path=endpoint("token"),
        auth=AuthPolicy.NONE,
        extra_headers=(("Authorization", f"Bearer {token}"),),
    )
    await dispatcher.execute(REVOKE_TOKEN, params, request, None)
    dispatcher.store.clear_if(token)
    return "Access token has been successfully revoked and cleared"


SET_TOKEN = ToolSpec.define(
    "set_token", "Set your Lichess API token",
    action="set token", category=CATEGORY, params=SetTokenParams, handler=_set_token,
)

REVOKE_TOKEN = ToolSpec.define(
    "revoke_token", "Revoke the current access token",
    action="revoke token", category=CATEGORY, params=NoParams, handler=_revoke_token,
)

TEST_TOKENS = ToolSpec.define(
    "test_tokens", "Test multiple OAuth tokens",
    action="test tokens", category=CATEGORY, params=TestTokensParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST, path=endpoint("token", "test"),
        body=text_body(p.tokens), auth=AuthPolicy.NONE,
    ),
)


# ─────────────────────────────────────────────────────────────────────────────
# Profile & preferences
# ─────────────────────────────────────────────────────────────────────────────


def _render_email(p: NoParams, result: NormalizedResult) -> str:
    return f"Your email address is: {document('get_my_email', result).get('email')}"


def _render_kid_mode(p: NoParams, result: NormalizedResult) -> str:
    enabled = bool(document("get_kid_mode", result).get("kid"))
    return f"Kid mode is {'enabled' if enabled else 'disabled'}"


GET_MY_PROFILE = ToolSpec.define(
    "get_my_profile", "Get your Lichess profile information",
    action="get profile", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(path=endpoint("account")),
)

GET_USER_PROFILE = ToolSpec.define(
    "get_user_profile", "Get a user's Lichess profile information",
    action="get user profile", category=CATEGORY, params=UserProfileParams,
    build=lambda p: RequestSpec(
        path=endpoint("user", p.username),
        query=query(("trophies", True if p.trophies else None)),
    ),
    messages={404: fmt("User {username} not found")},
)

GET_MY_EMAIL = ToolSpec.define(
    "get_my_email", "Get your email address",
    action="get email", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(path=endpoint("account", "email")),
    render=_render_email,
)

GET_KID_MODE = ToolSpec.define(
    "get_kid_mode", "Get kid mode status",
    action="get kid mode", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(path=endpoint("account", "kid")),
    render=_render_kid_mode,
)

SET_KID_MODE = ToolSpec.define(
    "set_kid_mode", "Set kid mode status",
    action="set kid mode", category=CATEGORY, params=SetKidModeParams,
    build=lambda p: RequestSpec(method=HttpMethod.POST, path=endpoint("account", "kid"), query=query(("v", p.value))),
    render=lambda p, _: f"Kid mode has been {'enabled' if p.value else 'disabled'}",
)

GET_PREFERENCES = ToolSpec.define(
    "get_preferences", "Get your preferences",
    action="get preferences", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(path=endpoint("account", "preferences")),
)

GET_TIMELINE = ToolSpec.define(
    "get_timeline", "Get your timeline",
    action="get timeline", category=CATEGORY, params=TimelineParams,
    build=lambda p: RequestSpec(path=endpoint("timeline"), query=p.pairs("since", "nb")),
)

GET_ONGOING_GAMES = ToolSpec.define(
    "get_ongoing_games", "Get your ongoing games (real-time and correspondence)",
    action="get ongoing games", category=CATEGORY, params=OngoingGamesParams,
    build=lambda p: RequestSpec(path=endpoint("account", "playing"), query=p.pairs("nb")),
)

UPGRADE_TO_BOT = ToolSpec.define(
    "upgrade_to_bot",
    "Upgrade to Bot account. WARNING: This is irreversible and the account must not have played any games.",
    action="upgrade to bot account", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(method=HttpMethod.POST, path=endpoint("bot", "account", "upgrade")),
    render=lambda p, _: (
        "Account has been successfully upgraded to a Bot account. The account can now only play as a Bot."
    ),
)

TOOLS = (
    SET_TOKEN, GET_MY_PROFILE, GET_USER_PROFILE, GET_MY_EMAIL, GET_KID_MODE, SET_KID_MODE,
    GET_PREFERENCES, GET_TIMELINE, TEST_TOKENS, REVOKE_TOKEN, UPGRADE_TO_BOT, GET_ONGOING_GAMES,
)
