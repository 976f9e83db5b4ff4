"""Standardized error handling for gateway invocations.

Provides the closed set of error kinds a tool call can fail with and the
structured error carried by raised exceptions. Uses Pydantic for validation
and serialization.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class ErrorCode(StrEnum):
    """Error kinds for tool failures.

    Every failure surfaced to the caller carries exactly one of these.
    """
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    NOT_FOUND = "NOT_FOUND"
    INVALID_REQUEST = "INVALID_REQUEST"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"


# Kinds raised before any request leaves the process
_LOCAL_CODES: frozenset[ErrorCode] = frozenset({
    ErrorCode.VALIDATION_ERROR,
    ErrorCode.MISSING_CREDENTIAL,
    ErrorCode.UNKNOWN_TOOL,
})


class ToolError(BaseModel):
    """Structured error response for tool failures.

    Attributes:
        tool_name: Name of the tool that failed
        message: Human-readable error message, already prefixed with the failed operation
        code: Machine-readable error kind
        status: HTTP status of the remote response, when one was received
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        validate_default=True,
        json_schema_extra={
            "title": "Tool Error",
            "description": "Structured error from a gateway invocation",
            "examples": [{
                "tool_name": "get_user_public_data",
                "message": "Failed to get user data: User nobody not found",
                "code": "NOT_FOUND",
                "status": 404,
            }],
        },
    )

    tool_name: Annotated[str, Field(min_length=1, description="Name of the tool that produced the error")]
    message: Annotated[str, Field(min_length=1, description="Human-readable error message")]
    code: ErrorCode = Field(description="Machine-readable error classification")
    status: Annotated[int | None, Field(default=None, ge=100, le=599, description="Remote HTTP status")]

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | Exception) -> str:
        """Accept Exception objects and extract message."""
        return str(v) if isinstance(v, Exception) else v

    @computed_field
    @property
    def is_local(self) -> bool:
        """Whether the failure was detected before any network call."""
        return self.code in _LOCAL_CODES

    @classmethod
    def create(cls, tool_name: str, message: str, code: ErrorCode, *, status: int | None = None) -> Self:
        """Factory method for construction."""
        return cls(tool_name=tool_name, message=message, code=code, status=status)

    def render(self) -> str:
        """Format error for the calling client."""
        return self.message

    __str__ = render


class ToolException(Exception):
    """Exception wrapping a ToolError for raising."""

    __slots__ = ("error",)

    def __init__(self, error: ToolError) -> None:
        self.error = error
        super().__init__(error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @classmethod
    def create(cls, tool_name: str, message: str, code: ErrorCode, *, status: int | None = None) -> Self:
        """Create tool exception."""
        return cls(ToolError.create(tool_name, message, code, status=status))

    def prefixed(self, action: str) -> ToolException:
        """Return a copy whose message names the failed operation."""
        return ToolException(self.error.model_copy(update={"message": f"Failed to {action}: {self.error.message}"}))
