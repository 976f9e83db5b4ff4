"""Following, blocking, notes and private messages."""

from __future__ import annotations

from pydantic import Field

from ..gateway import FreeText, HttpMethod, Identifier, NoParams, RequestSpec, ToolParams, ToolSpec, endpoint, form
from .common import UsernameParams, fmt

CATEGORY = "relations"
USER_NOT_FOUND = {404: fmt("User {username} not found")}


class UserTextParams(UsernameParams):
    text: FreeText = Field(description="Text to send")


class ThreadParams(ToolParams):
    user_id: Identifier = Field(description="User ID of the conversation partner")


def _relation(verb: str, description: str, action: str, done: str, messages: dict | None = None) -> ToolSpec:
    return ToolSpec.define(
        f"{verb}_user", description,
        action=action, category=CATEGORY, params=UsernameParams,
        build=lambda p: RequestSpec(method=HttpMethod.POST, path=endpoint("rel", verb, p.username)),
        render=lambda p, _: f"{done} {p.username}",
        messages={**USER_NOT_FOUND, **(messages or {})},
    )


ADD_USER_NOTE = ToolSpec.define(
    "add_user_note", "Add a private note about a user",
    action="add note", category=CATEGORY, params=UserTextParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST, path=endpoint("user", p.username, "note"), body=form(("text", p.text)),
    ),
    render=lambda p, _: f"Note successfully added for user {p.username}",
    messages=USER_NOT_FOUND,
)

SEND_MESSAGE = ToolSpec.define(
    "send_message", "Send a private message to another player",
    action="send message", category=CATEGORY, params=UserTextParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST, path=endpoint("inbox", p.username), body=form(("text", p.text)),
    ),
    render=lambda p, _: f"Message successfully sent to {p.username}",
    messages=USER_NOT_FOUND,
)

GET_THREAD = ToolSpec.define(
    "get_thread", "Get a message thread",
    action="get thread", category=CATEGORY, params=ThreadParams,
    build=lambda p: RequestSpec(path=endpoint("inbox", p.user_id)),
    messages={
        401: "Missing authorization or insufficient permissions",
        404: fmt("Thread with user {user_id} not found"),
    },
)

GET_FOLLOWING = ToolSpec.define(
    "get_following", "Get users followed by the logged in user",
    action="get following list", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(path=endpoint("rel", "following")),
)

FOLLOW_USER = _relation(
    "follow", "Follow a player", "follow user", "Successfully following",
    {400: fmt("Cannot follow {username}: invalid request (you may be trying to follow yourself)")},
)
UNFOLLOW_USER = _relation("unfollow", "Unfollow a player", "unfollow user", "Successfully unfollowed")
BLOCK_USER = _relation("block", "Block a player", "block user", "Successfully blocked")
UNBLOCK_USER = _relation("unblock", "Unblock a user", "unblock user", "Successfully unblocked")

TOOLS = (
    ADD_USER_NOTE, SEND_MESSAGE, GET_THREAD, GET_FOLLOWING,
    FOLLOW_USER, UNFOLLOW_USER, BLOCK_USER, UNBLOCK_USER,
)
