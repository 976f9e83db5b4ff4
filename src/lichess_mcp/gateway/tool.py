"""Declarative tool records for the dispatch table.

A ToolSpec binds a tool name to its argument model and to the functions the
dispatcher runs: `build` for plain request/response tools, or `handler` for
tools that touch the credential store.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..foundation.errors import JsonDict
from .mapper import StatusMessage
from .request import RequestSpec
from .response import ContentKind, NormalizedResult
from .validation import ToolParams

if TYPE_CHECKING:
    from .dispatcher import Dispatcher

P = TypeVar("P", bound=ToolParams)


class ToolMetadata(BaseModel):
    """Catalogue entry for a tool.

    Attributes:
        name: Unique identifier (snake_case, e.g., "export_game")
        description: What the tool does, shown to the calling model
        action: Verb phrase used in error prefixes ("Failed to <action>: ...")
        category: Grouping for listing (e.g., "games", "teams")
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[a-z][a-z0-9_]*$")
    description: str = Field(..., min_length=10)
    action: str = Field(..., min_length=3)
    category: str = Field(default="general")


@dataclass(frozen=True)
class ToolSpec(Generic[P]):
    """One dispatch-table record.

    Example:
        >>> spec = ToolSpec(
        ...     ToolMetadata(name="get_my_profile", description="Get your Lichess profile information",
        ...                  action="get profile", category="account"),
        ...     params=NoParams,
        ...     build=lambda p: RequestSpec(path="/account"),
        ... )
    """

    metadata: ToolMetadata
    params: type[P]
    build: Callable[[P], RequestSpec] | None = None
    render: Callable[[P, NormalizedResult], str] | None = None
    messages: Mapping[int, StatusMessage] = field(default_factory=dict)
    accepts: frozenset[ContentKind] | None = None
    handler: Callable[[Dispatcher, P], Awaitable[str]] | None = None

    def __post_init__(self) -> None:
        if (self.build is None) == (self.handler is None):
            raise ValueError(f"Tool '{self.metadata.name}' needs exactly one of build or handler")

    @classmethod
    def define(
        cls,
        name: str,
        description: str,
        *,
        action: str,
        category: str,
        params: type[P],
        build: Callable[[P], RequestSpec] | None = None,
        render: Callable[[P, NormalizedResult], str] | None = None,
        messages: Mapping[int, StatusMessage] | None = None,
        accepts: frozenset[ContentKind] | None = None,
        handler: Callable[[Dispatcher, P], Awaitable[str]] | None = None,
    ) -> ToolSpec[P]:
        """Flat constructor used by the tool modules."""
        return cls(
            ToolMetadata(name=name, description=description, action=action, category=category),
            params=params,
            build=build,
            render=render,
            messages=dict(messages or {}),
            accepts=accepts,
            handler=handler,
        )

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def action(self) -> str:
        return self.metadata.action

    def input_schema(self) -> JsonDict:
        """JSON schema of the arguments, keyed by the camelCase names callers use."""
        schema = self.params.model_json_schema(by_alias=True)
        schema.pop("title", None)
        schema.setdefault("properties", {})
        return schema

    def describe(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.metadata.description, "inputSchema": self.input_schema()}
