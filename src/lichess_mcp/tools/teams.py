"""Team lookup, membership and join-request moderation."""

from __future__ import annotations

from pydantic import Field

from ..gateway import FreeText, HttpMethod, RequestSpec, ToolParams, ToolSpec, endpoint, form, query
from .common import TeamIdParams, TeamUserParams, fmt

CATEGORY = "teams"
TEAM_NOT_FOUND = fmt("Team {team_id} not found")


class TeamMembersParams(TeamIdParams):
    max: int = Field(default=100, ge=1, description="Maximum number of members to fetch")


class JoinTeamParams(TeamIdParams):
    message: str | None = Field(default=None, description="Optional message to send with the join request")


class SearchTeamsParams(ToolParams):
    text: FreeText = Field(description="Search text")
    page: int = Field(default=1, ge=1, description="Page number")


def _join_request(verb: str) -> ToolSpec:
    return ToolSpec.define(
        f"{verb}_join_request", f"{verb.capitalize()} a join request for your team",
        action=f"{verb} join request", category=CATEGORY, params=TeamUserParams,
        build=lambda p: RequestSpec(
            method=HttpMethod.POST, path=endpoint("team", p.team_id, "request", p.user_id, verb),
        ),
        render=lambda p, _: f"Successfully {verb}d join request from user {p.user_id} to team {p.team_id}",
        messages={
            404: fmt("Team {team_id} or join request from user {user_id} not found"),
            403: f"You are not allowed to {verb} join requests for this team",
        },
    )


GET_TEAM_INFO = ToolSpec.define(
    "get_team_info", "Get information about a team",
    action="get team info", category=CATEGORY, params=TeamIdParams,
    build=lambda p: RequestSpec(path=endpoint("team", p.team_id)),
    messages={404: TEAM_NOT_FOUND},
)

GET_TEAM_MEMBERS = ToolSpec.define(
    "get_team_members", "Get members of a team",
    action="get team members", category=CATEGORY, params=TeamMembersParams,
    build=lambda p: RequestSpec(path=endpoint("team", p.team_id, "users"), query=p.pairs("max")),
    messages={404: TEAM_NOT_FOUND},
)

GET_TEAM_JOIN_REQUESTS = ToolSpec.define(
    "get_team_join_requests", "Get pending join requests of your team",
    action="get team join requests", category=CATEGORY, params=TeamIdParams,
    build=lambda p: RequestSpec(path=endpoint("team", p.team_id, "requests")),
    messages={404: TEAM_NOT_FOUND},
)

JOIN_TEAM = ToolSpec.define(
    "join_team", "Join a team",
    action="join team", category=CATEGORY, params=JoinTeamParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST,
        path=endpoint("team", p.team_id, "join"),
        body=form(("message", p.message if p.message and p.message.strip() else None)),
    ),
    render=lambda p, _: f"Successfully joined team {p.team_id}",
    messages={
        404: TEAM_NOT_FOUND,
        403: "You are not allowed to join this team",
        409: "You are already a member of this team",
    },
)

LEAVE_TEAM = ToolSpec.define(
    "leave_team", "Leave a team",
    action="leave team", category=CATEGORY, params=TeamIdParams,
    build=lambda p: RequestSpec(method=HttpMethod.POST, path=endpoint("team", p.team_id, "quit")),
    render=lambda p, _: f"Successfully left team {p.team_id}",
    messages={
        404: TEAM_NOT_FOUND,
        403: "You are not allowed to leave this team",
        409: "You are not a member of this team",
    },
)

KICK_USER_FROM_TEAM = ToolSpec.define(
    "kick_user_from_team", "Kick a user from your team",
    action="kick user", category=CATEGORY, params=TeamUserParams,
    build=lambda p: RequestSpec(method=HttpMethod.POST, path=endpoint("team", p.team_id, "kick", p.user_id)),
    render=lambda p, _: f"Successfully kicked user {p.user_id} from team {p.team_id}",
    messages={
        404: fmt("Team {team_id} or user {user_id} not found"),
        403: "You are not allowed to kick users from this team",
        409: "User is not a member of this team",
    },
)

ACCEPT_JOIN_REQUEST = _join_request("accept")
DECLINE_JOIN_REQUEST = _join_request("decline")

SEARCH_TEAMS = ToolSpec.define(
    "search_teams", "Search for teams",
    action="search teams", category=CATEGORY, params=SearchTeamsParams,
    build=lambda p: RequestSpec(path=endpoint("team", "search"), query=query(("text", p.text), ("page", p.page))),
)

TOOLS = (
    GET_TEAM_INFO, GET_TEAM_MEMBERS, GET_TEAM_JOIN_REQUESTS, JOIN_TEAM, LEAVE_TEAM,
    KICK_USER_FROM_TEAM, ACCEPT_JOIN_REQUEST, DECLINE_JOIN_REQUEST, SEARCH_TEAMS,
)
