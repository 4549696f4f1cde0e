"""Tool registry: binds names to schema-described handlers and mediates invocation."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
import inspect
import logging
from typing import Any, Awaitable, Mapping, Optional, Union

from pydantic import ValidationError

from .contracts import ToolResult, ToolSpec
from .errors import DuplicateTool, HandlerError, InvalidInput, UnknownTool
from .schema import InputSchema, PydanticSchemaValidator, SchemaValidator

logger = logging.getLogger(__name__)

HandlerReturn = Union[ToolResult, Mapping[str, Any]]
ToolHandler = Callable[..., Union[HandlerReturn, Awaitable[HandlerReturn]]]


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """A registered tool."""

    name: str
    description: str
    input_schema: InputSchema
    handler: ToolHandler

    def spec(self) -> ToolSpec:
        return ToolSpec(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema.to_json_schema(),
        )


class ToolRegistry:
    """Name to ToolDefinition mapping with validated invocation.

    Registration is expected to finish before the first invocation; after that
    the mapping is only read, so concurrent ``invoke`` calls need no locking.
    Registering a name twice raises :class:`DuplicateTool`.
    """

    def __init__(self, validator: Optional[SchemaValidator] = None) -> None:
        self._validator: SchemaValidator = validator or PydanticSchemaValidator()
        self._tools: dict[str, ToolDefinition] = {}

    def register(
        self,
        name: str,
        description: str,
        input_schema: InputSchema,
        handler: ToolHandler,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError("Tool name must be a non-empty string")
        if name in self._tools:
            raise DuplicateTool(name)
        self._tools[name] = ToolDefinition(name, description, input_schema, handler)
        logger.info("Registered tool", extra={"tool": name, "fields": input_schema.names})

    def tool(
        self, name: str, description: str = "", input_schema: Optional[InputSchema] = None
    ) -> Callable[[ToolHandler], ToolHandler]:
        """Decorator form of :meth:`register`; returns the function unchanged."""

        def decorator(fn: ToolHandler) -> ToolHandler:
            self.register(name, description or inspect.getdoc(fn) or "", input_schema or InputSchema(), fn)
            return fn

        return decorator

    def get(self, name: str) -> ToolDefinition:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownTool(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(list(self._tools.values()))

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def specs(self) -> list[ToolSpec]:
        return [definition.spec() for definition in self]

    async def invoke(self, name: str, raw_input: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Validate ``raw_input`` and run the named tool.

        Raises:
            UnknownTool: no tool registered under ``name``.
            InvalidInput: arguments violate the input schema; the handler is not called.
            HandlerError: the handler raised or returned something that is not a
                non-empty ToolResult.
        """

        definition = self.get(name)
        try:
            args = self._validator.validate(definition.input_schema, raw_input, tool=name)
        except InvalidInput as exc:
            logger.warning("Rejected tool input: %s", exc, extra={"tool": name})
            raise
        logger.debug("Invoking tool", extra={"tool": name})

        try:
            result = definition.handler(**args)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            logger.error("Tool handler failed", extra={"tool": name}, exc_info=True)
            raise HandlerError(name, exc) from exc

        return _coerce_result(name, result)


def _coerce_result(name: str, result: Any) -> ToolResult:
    if isinstance(result, ToolResult):
        if not result.content:
            raise HandlerError(name, ValueError("Tool returned empty content"))
        return result
    try:
        return ToolResult.model_validate(result)
    except ValidationError as exc:
        logger.error("Tool returned an invalid result", extra={"tool": name})
        raise HandlerError(name, exc) from exc


__all__ = ["ToolDefinition", "ToolHandler", "ToolRegistry"]
