"""Simultaneous exhibitions."""

from __future__ import annotations

from pydantic import Field

from ..gateway import HttpMethod, Identifier, NoParams, Number, RequestSpec, ToolParams, ToolSpec, endpoint, json_body
from .common import Color, SimulIdParams, Variant, fmt, membership

CATEGORY = "simuls"
SIMUL_NOT_FOUND = fmt("Simul {simul_id} not found")


class CreateSimulParams(ToolParams):
    name: Identifier = Field(description="Name of the simul")
    variant: Variant = Field(default="standard", description="Variant key")
    clock_time: Number = Field(default=5, ge=0, description="Clock initial time in minutes")
    clock_increment: Number = Field(default=3, ge=0, description="Clock increment in seconds")
    min_rating: int | None = Field(default=None, description="Minimum rating to join")
    max_rating: int | None = Field(default=None, description="Maximum rating to join")
    color: Color = Field(default="white", description="Color the host plays")
    text: str | None = Field(default=None, description="Simul description")


GET_CURRENT_SIMULS = ToolSpec.define(
    "get_current_simuls", "Get recently created, started and finished simuls",
    action="get current simuls", category=CATEGORY, params=NoParams,
    build=lambda p: RequestSpec(path=endpoint("simul")),
)

CREATE_SIMUL = ToolSpec.define(
    "create_simul", "Create a new simul",
    action="create simul", category=CATEGORY, params=CreateSimulParams,
    build=lambda p: RequestSpec(
        method=HttpMethod.POST,
        path=endpoint("simul", "new"),
        body=json_body(p.model_dump(by_alias=True, exclude_none=True)),
    ),
    messages={403: "You are not allowed to create simuls"},
)

JOIN_SIMUL = membership(
    "join_simul", "Join a simul",
    category=CATEGORY, params=SimulIdParams, root="simul", key="simul_id",
    verb="join", label="simul", target="simul", not_found=SIMUL_NOT_FOUND,
)

WITHDRAW_FROM_SIMUL = membership(
    "withdraw_from_simul", "Withdraw from a simul",
    category=CATEGORY, params=SimulIdParams, root="simul", key="simul_id",
    verb="withdraw", label="simul", target="simul", not_found=SIMUL_NOT_FOUND,
)

TOOLS = (GET_CURRENT_SIMULS, CREATE_SIMUL, JOIN_SIMUL, WITHDRAW_FROM_SIMUL)
