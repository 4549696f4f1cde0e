"""MCP transport adapter: exposes a ToolRegistry through the SDK's lowlevel Server.

The SDK owns framing, sessions and capability negotiation. This module only
maps ``tools/list`` to the registry's specs and ``tools/call`` to
:meth:`ToolRegistry.invoke`. Registry errors propagate into the SDK, which
reports them to the client as ``isError`` results.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .config import ServerConfig
from .contracts import ToolResult
from .registry import ToolRegistry

logger = logging.getLogger(__name__)


def to_mcp_content(result: ToolResult) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=item.text) for item in result.content]


def build_server(registry: ToolRegistry, config: Optional[ServerConfig] = None) -> Server:
    config = config or ServerConfig()
    server: Server = Server(config.name, version=config.version, instructions=config.instructions)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=spec.name, description=spec.description, inputSchema=spec.input_schema)
            for spec in registry.specs()
        ]

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        result = await registry.invoke(name, arguments)
        return to_mcp_content(result)

    logger.info("Built MCP server %s %s with %d tools", config.name, config.version, len(registry))
    return server


async def serve_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


__all__ = ["build_server", "serve_stdio", "to_mcp_content"]
