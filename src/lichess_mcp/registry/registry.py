"""Central registry of dispatchable tools.

The registry provides:
- Tool registration and lookup by name
- Category-based filtering
- The catalogue (name, description, input schema) served to MCP clients
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ..gateway.tool import ToolSpec


class ToolRegistry:
    """Name -> ToolSpec table.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register(GET_MY_PROFILE)
        >>> "get_my_profile" in registry
        True
    """

    __slots__ = ("_tools",)

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec[Any]] = {}

    def register(self, tool: ToolSpec[Any]) -> None:
        """Register a tool, rejecting duplicate names."""
        name = tool.name
        if name in self._tools:
            raise ValueError(f"Tool '{name}' already registered. Use unregister() first.")
        self._tools[name] = tool

    def register_all(self, tools: list[ToolSpec[Any]] | tuple[ToolSpec[Any], ...]) -> None:
        for tool in tools:
            self.register(tool)

    def unregister(self, name: str) -> bool:
        """Remove a tool by name. Returns True if found."""
        return self._tools.pop(name, None) is not None

    def get(self, name: str) -> ToolSpec[Any] | None:
        return self._tools.get(name)

    def __getitem__(self, name: str) -> ToolSpec[Any]:
        """Get tool by name, raises KeyError if not found."""
        return self._tools[name]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolSpec[Any]]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def names(self) -> list[str]:
        return list(self._tools)

    def by_category(self, category: str) -> list[ToolSpec[Any]]:
        return [t for t in self._tools.values() if t.metadata.category == category]

    def categories(self) -> set[str]:
        return {t.metadata.category for t in self._tools.values()}

    def catalogue(self) -> list[dict[str, Any]]:
        """`{name, description, inputSchema}` for every tool, in registration order."""
        return [tool.describe() for tool in self._tools.values()]
