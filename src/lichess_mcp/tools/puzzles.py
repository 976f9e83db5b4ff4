"""Puzzle activity, dashboards, Puzzle Racer and Puzzle Storm."""

from __future__ import annotations

from pydantic import Field

from ..foundation.errors import ErrorCode, ToolException
from ..gateway import HttpMethod, Identifier, NoParams, NormalizedResult, RequestSpec, ToolParams, ToolSpec, endpoint
from .common import INVALID_RESPONSE, document, fmt

CATEGORY = "puzzles"


class ActivityParams(ToolParams):
    max: int | None = Field(default=None, ge=1, le=200, description="How many entries to download (1-200)")


class DashboardParams(ToolParams):
    days: int = Field(default=30, ge=1, le=30, description="How many days to look back (1-30)")


class RaceParams(ToolParams):
    race_id: Identifier = Field(description="Puzzle race ID")


def _race(tool_name: str):
    """Renderer that insists on a race document carrying both id and url."""
    def render(p: ToolParams, result: NormalizedResult) -> str:
        race = document(tool_name, result)
        if not race.get("id") or not race.get("url"):
            raise ToolException.create(tool_name, INVALID_RESPONSE, ErrorCode.PARSE_ERROR)
        return result.render()
    return render


GET_PUZZLE_ACTIVITY = ToolSpec.define(
    "get_puzzle_activity", "Get your puzzle activity",
    action="get puzzle activity", category=CATEGORY, params=ActivityParams,
    build=lambda p: RequestSpec(path=endpoint("puzzle", "activity"), query=p.pairs("max")),
)

GET_PUZZLE_DASHBOARD = ToolSpec.define(
    "get_puzzle_dashboard", "Get your puzzle dashboard",
    action="get puzzle dashboard", category=CATEGORY, params=DashboardParams,
    build=lambda p: RequestSpec(path=endpoint("puzzle", "dashboard", p.days)),
)

GET_PUZZLE_RACE = ToolSpec.define(
    "get_puzzle_race", "Get info about a puzzle race",
    action="get puzzle race", category=CATEGORY, params=RaceParams,
    build=lambda p: RequestSpec(path=endpoint("racer", p.race_id)),
    render=_race("get_puzzle_race"),
    messages={404: fmt("Puzzle race {race_id} not found")},
)

CREATE_PUZZLE_RACE = ToolSpec.define(
    "create_puzzle_race", "Create a new puzzle race",
    action="create puzzle race", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(method=HttpMethod.POST, path=endpoint("racer")),
    render=_race("create_puzzle_race"),
)

GET_PUZZLE_STORM_DASHBOARD = ToolSpec.define(
    "get_puzzle_storm_dashboard", "Get your puzzle storm dashboard",
    action="get puzzle storm dashboard", category=CATEGORY, params=DashboardParams,
    build=lambda p: RequestSpec(path=endpoint("storm", "dashboard", p.days)),
)

TOOLS = (
    GET_PUZZLE_ACTIVITY, GET_PUZZLE_DASHBOARD, GET_PUZZLE_RACE,
    CREATE_PUZZLE_RACE, GET_PUZZLE_STORM_DASHBOARD,
)
