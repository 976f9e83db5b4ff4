"""Public user data, statuses and leaderboards."""

from __future__ import annotations

from pydantic import Field

from ..gateway import HttpMethod, NoParams, RequestSpec, ToolParams, ToolSpec, endpoint, query, text_body
from ..gateway.validation import id_list
from .common import PerfType, PerfTypeOrCorrespondence, UsernameParams, flag, fmt

CATEGORY = "users"
StatusIds = id_list(100)
UserIds = id_list(300)

USER_NOT_FOUND = {404: fmt("User {username} not found")}


class UsersStatusParams(ToolParams):
    ids: StatusIds = Field(description="User IDs separated by commas. Up to 100 IDs.")
    with_signal: bool | None = flag("Include network signal strength (1 to 4)")
    with_game_ids: bool | None = flag("Include the ID of the user's current game")
    with_game_metas: bool | None = flag("Include metadata of the user's current game")


class LeaderboardParams(ToolParams):
    nb: int = Field(default=100, ge=1, le=200, description="How many users to fetch (1-200)")
    perf_type: PerfType = Field(description="The speed or variant")


class PublicDataParams(UsernameParams):
    with_trophies: bool | None = flag("Include user trophies")


class PerformanceParams(UsernameParams):
    perf: PerfTypeOrCorrespondence = Field(description="Performance type")


class UsersByIdParams(ToolParams):
    ids: UserIds = Field(description="User IDs separated by commas. Up to 300 IDs.")


GET_USERS_STATUS = ToolSpec.define(
    "get_users_status", "Get real-time users status",
    action="get user statuses", category=CATEGORY, params=UsersStatusParams,
    build=lambda p: RequestSpec(
        path=endpoint("users", "status"),
        query=query(
            ("ids", p.ids),
            ("withSignal", True if p.with_signal else None),
            ("withGameIds", True if p.with_game_ids else None),
            ("withGameMetas", True if p.with_game_metas else None),
        ),
    ),
)

GET_ALL_TOP_10 = ToolSpec.define(
    "get_all_top_10", "Get the top 10 players for each speed and variant",
    action="get top 10 players", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(path=endpoint("player")),
)

GET_LEADERBOARD = ToolSpec.define(
    "get_leaderboard", "Get the leaderboard for a single speed or variant",
    action="get leaderboard", category=CATEGORY, params=LeaderboardParams,
    build=lambda p: RequestSpec(path=endpoint("player", "top", p.nb, p.perf_type)),
)

GET_USER_PUBLIC_DATA = ToolSpec.define(
    "get_user_public_data", "Get public data of a user",
    action="get user data", category=CATEGORY, params=PublicDataParams,
    build=lambda p: RequestSpec(
        path=endpoint("user", p.username),
        query=query(("trophies", True if p.with_trophies else None)),
    ),
    messages=USER_NOT_FOUND,
)

GET_RATING_HISTORY = ToolSpec.define(
    "get_rating_history", "Get rating history of a user for all perf types",
    action="get rating history", category=CATEGORY, params=UsernameParams,
    build=lambda p: RequestSpec(path=endpoint("user", p.username, "rating-history")),
    messages=USER_NOT_FOUND,
)

GET_USER_PERFORMANCE = ToolSpec.define(
    "get_user_performance", "Get performance statistics of a user",
    action="get user performance", category=CATEGORY, params=PerformanceParams,
    build=lambda p: RequestSpec(path=endpoint("user", p.username, "perf", p.perf)),
    messages=USER_NOT_FOUND,
)

GET_USER_ACTIVITY = ToolSpec.define(
    "get_user_activity", "Get activity feed of a user",
    action="get user activity", category=CATEGORY, params=UsernameParams,
    build=lambda p: RequestSpec(path=endpoint("user", p.username, "activity")),
    messages=USER_NOT_FOUND,
)

GET_USERS_BY_ID = ToolSpec.define(
    "get_users_by_id", "Get multiple users by their IDs",
    action="get users", category=CATEGORY, params=UsersByIdParams,
    build=lambda p: RequestSpec(method=HttpMethod.POST, path=endpoint("users"), body=text_body(p.ids)),
)

TOOLS = (
    GET_USERS_STATUS, GET_ALL_TOP_10, GET_LEADERBOARD, GET_USER_PUBLIC_DATA,
    GET_RATING_HISTORY, GET_USER_PERFORMANCE, GET_USER_ACTIVITY, GET_USERS_BY_ID,
)
