"""Declarative input schemas and the pydantic-backed validator that interprets them.

A schema is an ordered set of named field specs. Each spec is one of a small
set of tagged variants::

    InputSchema.of(
        content=string("The content of the blog post"),
        title=optional_string("The title of the blog post"),
        tags=optional_string_array("Tags for the blog post"),
    )

The same value renders to JSON Schema for ``tools/list`` and drives argument
validation for ``tools/call``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterator, Literal, Mapping, Optional, Protocol, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from .errors import FieldIssue, InvalidInput

FieldKind = Literal["string", "bounded_string", "optional_string", "optional_string_array"]

ValidatedInput = Dict[str, Any]


@dataclass(frozen=True, slots=True)
class FieldSpec:
    kind: FieldKind
    description: str = ""
    min_length: Optional[int] = None
    max_length: Optional[int] = None

    @property
    def required(self) -> bool:
        return self.kind in ("string", "bounded_string")


def string(description: str = "") -> FieldSpec:
    return FieldSpec("string", description)


def bounded_string(
    description: str = "",
    *,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    length: Optional[int] = None,
) -> FieldSpec:
    """String with length limits. ``length`` pins both bounds to the same value."""

    if length is not None:
        min_length = max_length = length
    if min_length is not None and max_length is not None and min_length > max_length:
        raise ValueError(f"min_length {min_length} exceeds max_length {max_length}")
    return FieldSpec("bounded_string", description, min_length, max_length)


def optional_string(description: str = "") -> FieldSpec:
    return FieldSpec("optional_string", description)


def optional_string_array(description: str = "") -> FieldSpec:
    return FieldSpec("optional_string_array", description)


@dataclass(frozen=True, slots=True)
class InputSchema:
    """Ordered, hashable mapping of field name to FieldSpec."""

    fields: Tuple[Tuple[str, FieldSpec], ...] = ()

    @classmethod
    def of(cls, **fields: FieldSpec) -> "InputSchema":
        return cls(tuple(fields.items()))

    def __iter__(self) -> Iterator[Tuple[str, FieldSpec]]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.fields]

    def to_json_schema(self) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        required: list[str] = []
        for name, spec in self.fields:
            if spec.kind == "optional_string_array":
                prop: Dict[str, Any] = {"type": "array", "items": {"type": "string"}}
            else:
                prop = {"type": "string"}
            if spec.min_length is not None:
                prop["minLength"] = spec.min_length
            if spec.max_length is not None:
                prop["maxLength"] = spec.max_length
            if spec.description:
                prop["description"] = spec.description
            properties[name] = prop
            if spec.required:
                required.append(name)

        schema: Dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema


class SchemaValidator(Protocol):
    """Turns raw, untyped arguments into a validated record or raises InvalidInput."""

    def validate(
        self, schema: InputSchema, raw: Optional[Mapping[str, Any]], *, tool: str = ""
    ) -> ValidatedInput: ...


def _field_definition(spec: FieldSpec) -> Tuple[Any, Any]:
    if spec.kind == "string":
        return (str, Field(..., description=spec.description or None))
    if spec.kind == "bounded_string":
        return (
            str,
            Field(
                ...,
                min_length=spec.min_length,
                max_length=spec.max_length,
                description=spec.description or None,
            ),
        )
    # Absent optional fields default to None; an explicit null is rejected like the JSON Schema does.
    if spec.kind == "optional_string":
        return (str, Field(None, description=spec.description or None))
    if spec.kind == "optional_string_array":
        return (list[str], Field(None, description=spec.description or None))
    raise ValueError(f"Unsupported field kind: {spec.kind}")


@lru_cache(maxsize=None)
def model_for(schema: InputSchema) -> Type[BaseModel]:
    """Build (once per schema) the pydantic model that validates it."""

    definitions = {name: _field_definition(spec) for name, spec in schema}
    return create_model(  # type: ignore[call-overload]
        "ToolArguments",
        __config__=ConfigDict(extra="ignore", protected_namespaces=()),
        **definitions,
    )


def _issue_from(error: Mapping[str, Any]) -> FieldIssue:
    path = ".".join(str(part) for part in error.get("loc", ()))
    constraint = error.get("type", "invalid")
    ctx = error.get("ctx")
    if ctx:
        constraint += "[" + ", ".join(f"{k}={v}" for k, v in ctx.items()) + "]"
    return FieldIssue(path=path, constraint=constraint, message=error.get("msg", ""), value=error.get("input"))


class PydanticSchemaValidator:
    """SchemaValidator backed by pydantic models built from InputSchema values."""

    def validate(
        self, schema: InputSchema, raw: Optional[Mapping[str, Any]], *, tool: str = ""
    ) -> ValidatedInput:
        model = model_for(schema)
        try:
            parsed = model.model_validate({} if raw is None else raw)
        except ValidationError as exc:
            raise InvalidInput(tool, [_issue_from(err) for err in exc.errors()]) from exc
        return parsed.model_dump()


__all__ = [
    "FieldKind",
    "FieldSpec",
    "InputSchema",
    "ValidatedInput",
    "SchemaValidator",
    "PydanticSchemaValidator",
    "bounded_string",
    "model_for",
    "optional_string",
    "optional_string_array",
    "string",
]
