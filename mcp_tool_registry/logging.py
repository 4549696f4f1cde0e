"""Logging setup: structured JSON or the plain MCP server format."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Any, Dict

import orjson

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Standard LogRecord attributes; anything else on a record came from ``extra=``.
_RESERVED_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


def _json_default(obj: Any) -> str:
    try:
        return repr(obj)
    except Exception:
        return f"<{type(obj).__name__}>"


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    ``tool`` (set by the registry through ``extra=``) is promoted to a top-level
    key; any other extra fields are grouped under ``context``.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_RECORD_ATTRS and not key.startswith("_")
        }
        tool = context.pop("tool", None)
        if tool is not None:
            payload["tool"] = tool
        if context:
            payload["context"] = context

        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)

        return orjson.dumps(payload, default=_json_default).decode()


def configure_logging(level: str = "INFO", *, name: str = "mcp-tools", json: bool = False) -> logging.Logger:
    """Install a single stderr handler on the root logger and return ``name``'s logger.

    stdout stays reserved for the stdio transport.
    """

    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json else logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper())
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "TEXT_FORMAT", "configure_logging"]
