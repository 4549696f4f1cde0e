"""Example tools: greeting, weather alerts and blog frontmatter.

Each handler is a plain function returning a ToolResult so it can be called
directly or through a ToolRegistry.
"""

from __future__ import annotations

from datetime import datetime, timezone
from functools import partial
import re
from typing import Callable, Mapping, Optional, Sequence

from .contracts import ToolResult, text_result
from .registry import ToolRegistry
from .schema import InputSchema, bounded_string, optional_string, optional_string_array, string

Clock = Callable[[], datetime]

MOCK_ALERTS: Mapping[str, tuple[str, ...]] = {
    "CA": ("Wildfire warning in Northern California", "Heat advisory in Southern California"),
    "NY": ("Flood warning in Western New York", "Thunderstorm watch in NYC metro area"),
    "FL": ("Hurricane watch along the coast", "Flood warning in South Florida"),
}
NO_ALERTS = ("No current alerts for this state",)
DEFAULT_AUTHOR = "Anonymous"

_HEADING_MARKER = re.compile(r"^#\s*")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def hello(name: str) -> ToolResult:
    return text_result(f"Hello, {name}! Welcome to MCP Tools.")


def get_alerts(state: str, alerts: Mapping[str, Sequence[str]] = MOCK_ALERTS) -> ToolResult:
    """Format the alerts for a two-letter state code, one ``- `` line each."""

    lines = alerts.get(state)
    if lines is None:
        lines = NO_ALERTS
    body = "\n".join(f"- {alert}" for alert in lines)
    return text_result(f"Weather Alerts for {state}:\n{body}")


def derive_title(content: str) -> str:
    first_line = content.split("\n", 1)[0]
    return _HEADING_MARKER.sub("", first_line, count=1)


def render_frontmatter(title: str, author: str, date: str, tags: Sequence[str]) -> str:
    if tags:
        tags_line = "tags: [" + ", ".join(f'"{tag}"' for tag in tags) + "]"
    else:
        tags_line = "tags: []"
    return "\n".join(
        [
            "---",
            f'title: "{title}"',
            f'author: "{author}"',
            f'date: "{date}"',
            tags_line,
            "---",
        ]
    )


def get_frontmatter(
    content: str,
    title: Optional[str] = None,
    author: Optional[str] = None,
    tags: Optional[Sequence[str]] = None,
    *,
    clock: Clock = utc_now,
) -> ToolResult:
    """Prepend a title/author/date/tags block to ``content``.

    Missing (or empty) title falls back to the first line of the content with a
    leading ``#`` removed; missing author becomes "Anonymous". The date comes
    from ``clock`` as YYYY-MM-DD. The content follows the closing ``---`` and a
    blank line, unchanged.
    """

    frontmatter = render_frontmatter(
        title or derive_title(content),
        author or DEFAULT_AUTHOR,
        clock().strftime("%Y-%m-%d"),
        tags or (),
    )
    return text_result(f"{frontmatter}\n\n{content}")


HELLO_SCHEMA = InputSchema.of(name=string("Your name"))
ALERTS_SCHEMA = InputSchema.of(
    state=bounded_string("Two-letter state code (e.g. CA, NY)", length=2),
)
FRONTMATTER_SCHEMA = InputSchema.of(
    content=string("The content of the blog post"),
    title=optional_string("The title of the blog post"),
    author=optional_string("The author of the blog post"),
    tags=optional_string_array("Tags for the blog post"),
)


def register_example_tools(registry: ToolRegistry, *, clock: Clock = utc_now) -> ToolRegistry:
    """Register Hello, get_alerts and get_frontmatter on ``registry``."""

    registry.register("Hello", "Get a greeting with your name", HELLO_SCHEMA, hello)
    registry.register("get_alerts", "Get weather alerts for a state", ALERTS_SCHEMA, get_alerts)
    registry.register(
        "get_frontmatter",
        "Generate frontmatter for a blog post",
        FRONTMATTER_SCHEMA,
        partial(get_frontmatter, clock=clock),
    )
    return registry


__all__ = [
    "Clock",
    "MOCK_ALERTS",
    "NO_ALERTS",
    "DEFAULT_AUTHOR",
    "derive_title",
    "get_alerts",
    "get_frontmatter",
    "hello",
    "register_example_tools",
    "render_frontmatter",
    "utc_now",
]
