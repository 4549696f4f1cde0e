"""Entry point for the example tools MCP server."""
from __future__ import annotations

import anyio

from .config import ServerConfig
from .logging import configure_logging
from .registry import ToolRegistry
from .server import build_server, serve_stdio
from .tools import register_example_tools


def main() -> None:
    """Run the example tools over stdio."""
    config = ServerConfig.from_env()
    logger = configure_logging(config.log_level, name=config.name, json=config.log_json)

    registry = register_example_tools(ToolRegistry())
    server = build_server(registry, config)

    logger.info("Starting %s on stdio", config.name)
    anyio.run(serve_stdio, server)


if __name__ == "__main__":
    main()
