"""Response envelope and listing contracts for MCP tools."""

from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    """Plain text content item."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["text"] = "text"
    text: str = Field(..., description="Text payload")


# Additional content kinds join this alias as tagged variants.
ContentItem = TextContent


class ToolResult(BaseModel):
    """Envelope every tool handler returns."""

    model_config = ConfigDict(extra="forbid")

    content: list[ContentItem] = Field(..., min_length=1, description="Ordered content items")

    def text(self, sep: str = "\n") -> str:
        return sep.join(item.text for item in self.content)


class ToolSpec(BaseModel):
    """Public description of a registered tool, as listed to clients."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    input_schema: Dict[str, Any] = Field(
        default_factory=dict, alias="inputSchema", description="JSON Schema for arguments"
    )


def text_result(*texts: str) -> ToolResult:
    """Build a ToolResult with one text item per argument."""

    return ToolResult(content=[TextContent(text=text) for text in texts])


__all__ = ["TextContent", "ContentItem", "ToolResult", "ToolSpec", "text_result"]
