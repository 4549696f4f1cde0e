from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from . import __version__


def env_str(key: str, default: str | None = None) -> str:
    return os.getenv(key, default if default is not None else "")


def env_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None:
        return default
    return v.lower() in ("1", "true", "yes", "on")


class ServerConfig(BaseModel):
    """Settings for the MCP server process."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="mcp-tools", min_length=1)
    version: str = __version__
    instructions: Optional[str] = None
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(cls) -> "ServerConfig":
        return cls(
            name=env_str("MCP_SERVER_NAME", "mcp-tools"),
            version=env_str("MCP_SERVER_VERSION", __version__),
            instructions=env_str("MCP_INSTRUCTIONS") or None,
            log_level=env_str("LOG_LEVEL", "INFO").upper(),
            log_json=env_bool("LOG_JSON", False),
        )


__all__ = ["ServerConfig", "env_bool", "env_str"]
