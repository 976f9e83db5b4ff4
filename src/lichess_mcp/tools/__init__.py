"""Lichess tool catalogue.

Each module contributes a TOOLS tuple of ToolSpec records; build_registry()
assembles them into the dispatch table in a stable order.

Quick Start:
    >>> from lichess_mcp.tools import build_registry
    >>> registry = build_registry()
    >>> registry["get_leaderboard"].metadata.category
    'users'
"""

from __future__ import annotations

from typing import Any

from ..gateway.tool import ToolSpec
from ..registry import ToolRegistry
from . import (
    account,
    analysis,
    board,
    broadcasts,
    challenges,
    games,
    puzzles,
    relations,
    simuls,
    studies,
    teams,
    tournaments,
    users,
)

ALL_TOOLS: tuple[ToolSpec[Any], ...] = (
    *account.TOOLS,
    *relations.TOOLS,
    *users.TOOLS,
    *games.TOOLS,
    *puzzles.TOOLS,
    *teams.TOOLS,
    *board.TOOLS,
    *challenges.TOOLS,
    *tournaments.TOOLS,
    *simuls.TOOLS,
    *studies.TOOLS,
    *broadcasts.TOOLS,
    *analysis.TOOLS,
)


def build_registry() -> ToolRegistry:
    """Fresh registry holding every Lichess tool."""
    registry = ToolRegistry()
    registry.register_all(ALL_TOOLS)
    return registry


__all__ = ["ALL_TOOLS", "build_registry"]
