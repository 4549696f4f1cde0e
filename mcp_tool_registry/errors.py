"""Error taxonomy for tool registration and invocation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


class ToolError(Exception):
    """Base class for every registry failure."""


class DuplicateTool(ToolError):
    """Raised when a tool name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Tool already registered: {name}")
        self.name = name


class UnknownTool(ToolError):
    """Raised when invoking a name that was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


@dataclass(frozen=True, slots=True)
class FieldIssue:
    """One validation diagnostic: where it failed and which constraint broke."""

    path: str
    constraint: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        return f"{self.path or '<input>'}: {self.message} ({self.constraint})"


class InvalidInput(ToolError):
    """Raised when raw arguments do not satisfy the tool's input schema."""

    def __init__(self, name: str, issues: Iterable[FieldIssue]) -> None:
        self.name = name
        self.issues = tuple(issues)
        detail = "; ".join(str(issue) for issue in self.issues) or "invalid input"
        super().__init__(f"Invalid input for tool '{name}': {detail}")


class HandlerError(ToolError):
    """Raised when a tool handler fails. The original exception is kept as ``cause``."""

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"Tool '{name}' failed: {cause}")
        self.name = name
        self.cause = cause


__all__ = [
    "ToolError",
    "DuplicateTool",
    "UnknownTool",
    "FieldIssue",
    "InvalidInput",
    "HandlerError",
]
