"""Shared fixtures for mcp-tool-registry tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from mcp_tool_registry import ToolRegistry
from mcp_tool_registry.tools import register_example_tools


@pytest.fixture
def fixed_now():
    """Fixed instant used as the frontmatter date."""
    return datetime(2023, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def registry():
    """Empty registry with the default pydantic validator."""
    return ToolRegistry()


@pytest.fixture
def example_registry(registry, fixed_clock):
    """Registry with Hello, get_alerts and get_frontmatter registered."""
    return register_example_tools(registry, clock=fixed_clock)


@pytest.fixture
def blog_post():
    return "# Test Post\n\nThis is a test post."
