"""Schema-validated tool registration for MCP servers."""

__version__ = "0.1.0"

from .contracts import TextContent, ToolResult, ToolSpec, text_result  # noqa: E402
from .errors import (  # noqa: E402
    DuplicateTool,
    FieldIssue,
    HandlerError,
    InvalidInput,
    ToolError,
    UnknownTool,
)
from .registry import ToolDefinition, ToolRegistry  # noqa: E402
from .schema import (  # noqa: E402
    InputSchema,
    PydanticSchemaValidator,
    SchemaValidator,
    bounded_string,
    optional_string,
    optional_string_array,
    string,
)

__all__ = [
    "__version__",
    "DuplicateTool",
    "FieldIssue",
    "HandlerError",
    "InputSchema",
    "InvalidInput",
    "PydanticSchemaValidator",
    "SchemaValidator",
    "TextContent",
    "ToolDefinition",
    "ToolError",
    "ToolRegistry",
    "ToolResult",
    "ToolSpec",
    "UnknownTool",
    "bounded_string",
    "optional_string",
    "optional_string_array",
    "string",
    "text_result",
]
