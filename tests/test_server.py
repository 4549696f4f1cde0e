"""Tests for the MCP transport adapter."""

from __future__ import annotations

import pytest
from mcp import types

from mcp_tool_registry.config import ServerConfig
from mcp_tool_registry.errors import InvalidInput
from mcp_tool_registry.server import build_server


def _call(name: str, arguments: dict) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


@pytest.fixture
def server(example_registry):
    return build_server(example_registry, ServerConfig(name="test-server", version="1.0.0"))


def test_server_identity(server):
    """Test the server takes its name and version from config."""
    assert server.name == "test-server"
    assert server.version == "1.0.0"


@pytest.mark.asyncio
async def test_build_server_lists_tools(server) -> None:
    """Test tools/list returns every registered tool."""
    list_handler = server.request_handlers[types.ListToolsRequest]
    result = await list_handler(types.ListToolsRequest(method="tools/list"))
    tools = {tool.name: tool for tool in result.root.tools}  # type: ignore[attr-defined]

    assert set(tools) == {"Hello", "get_alerts", "get_frontmatter"}
    assert tools["Hello"].description == "Get a greeting with your name"
    assert tools["get_alerts"].inputSchema["properties"]["state"]["minLength"] == 2
    assert tools["get_frontmatter"].inputSchema["required"] == ["content"]


@pytest.mark.asyncio
async def test_call_tool_returns_text_content(server) -> None:
    """Test tools/call returns the handler's text content."""
    call_handler = server.request_handlers[types.CallToolRequest]
    result = await call_handler(_call("Hello", {"name": "World"}))
    call_result = result.root  # type: ignore[attr-defined]

    assert not call_result.isError
    assert len(call_result.content) == 1
    assert call_result.content[0].type == "text"
    assert call_result.content[0].text == "Hello, World! Welcome to MCP Tools."


@pytest.mark.asyncio
async def test_call_frontmatter(server) -> None:
    """Test tools/call reaches get_frontmatter with the fixed clock."""
    call_handler = server.request_handlers[types.CallToolRequest]
    result = await call_handler(_call("get_frontmatter", {"content": "# Hi\n\nBody", "tags": ["a"]}))
    text = result.root.content[0].text  # type: ignore[attr-defined]

    assert 'date: "2023-01-01"' in text
    assert 'tags: ["a"]' in text


@pytest.mark.asyncio
async def test_unknown_tool_is_reported_as_error(server) -> None:
    """Test an unknown tool comes back as an error result."""
    call_handler = server.request_handlers[types.CallToolRequest]
    result = await call_handler(_call("nope", {}))
    call_result = result.root  # type: ignore[attr-defined]

    assert call_result.isError
    assert "Unknown tool" in call_result.content[0].text


@pytest.mark.asyncio
@pytest.mark.parametrize("state", ["C", "CAL"])
async def test_invalid_input_is_reported_as_error(server, state) -> None:
    """Test a bad region code comes back as an error result."""
    call_handler = server.request_handlers[types.CallToolRequest]
    result = await call_handler(_call("get_alerts", {"state": state}))
    call_result = result.root  # type: ignore[attr-defined]

    assert call_result.isError
    assert "Weather Alerts" not in call_result.content[0].text


@pytest.mark.asyncio
async def test_optional_null_is_rejected_by_registry_too(server, example_registry) -> None:
    """Test an explicit null for an optional field fails in both the registry and tools/call."""
    arguments = {"content": "x", "title": None}

    with pytest.raises(InvalidInput) as excinfo:
        await example_registry.invoke("get_frontmatter", arguments)
    assert excinfo.value.issues[0].path == "title"

    call_handler = server.request_handlers[types.CallToolRequest]
    result = await call_handler(_call("get_frontmatter", arguments))
    assert result.root.isError  # type: ignore[attr-defined]
