"""OpenAPI schema objects and their JSON encoding.

Every schema has a ``title`` and can be encoded into a JSON-ready dict with
:meth:`Schema.encode`. Default values are given as text and converted with
:meth:`Schema.encode_value`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from papi.hasher import hash_value
from papi.openapi.context import EncoderContext
from papi.scanner import INT, IntType, create_scanner

REF_PREFIX = "#/components/schemas/"


class Schema(ABC):
    """Base of all schema types."""

    title: str

    @abstractmethod
    def encode(self, ctx: EncoderContext) -> dict[str, Any]:
        """The schema as a JSON object."""

    @abstractmethod
    def encode_value(self, val: str) -> Any:
        """Convert the text ``val`` into a JSON value of this schema's type."""

    def hash(self) -> int:
        """A 64-bit hash of the schema's fields."""
        return hash_value(self)


def encode_schema(ctx: EncoderContext, schema: Schema | None) -> dict[str, Any]:
    """Encode ``schema``, or an empty object when there is none."""
    if schema is None:
        return {}
    return schema.encode(ctx)


def _common(
    typ: str,
    title: str,
    description: str,
    nullable: bool,
    read_only: bool,
    write_only: bool,
) -> dict[str, Any]:
    doc: dict[str, Any] = {"type": typ}
    if title:
        doc["title"] = title
    if description:
        doc["description"] = description
    if nullable:
        doc["nullable"] = True
    if read_only:
        doc["readOnly"] = True
    if write_only:
        doc["writeOnly"] = True
    return doc


@dataclass(eq=True)
class Array(Schema):
    title: str = ""
    description: str = ""
    min: int = 0
    max: int = 0
    items: Schema | None = None
    default: list[str] = field(default_factory=list)
    nullable: bool = False
    read_only: bool = False
    write_only: bool = False
    unique_items: bool = False

    def encode(self, ctx: EncoderContext) -> dict[str, Any]:
        doc = _common(
            "array",
            self.title,
            self.description,
            self.nullable,
            self.read_only,
            self.write_only,
        )
        if self.min > 0:
            doc["minItems"] = self.min
        if self.max > 0:
            doc["maxItems"] = self.max
        if self.items is not None:
            doc["items"] = encode_schema(ctx, self.items)
        if self.unique_items:
            doc["uniqueItems"] = True
        if self.default:
            if self.items is None:
                raise ValueError("array default values require an item schema")
            doc["default"] = [self.items.encode_value(v) for v in self.default]
        return doc

    def encode_value(self, val: str) -> Any:
        raise ValueError("default nested arrays not supported")


@dataclass(eq=True)
class Boolean(Schema):
    title: str = ""
    description: str = ""
    default: str = ""
    nullable: bool = False
    read_only: bool = False
    write_only: bool = False

    def encode(self, ctx: EncoderContext) -> dict[str, Any]:
        doc = _common(
            "boolean",
            self.title,
            self.description,
            self.nullable,
            self.read_only,
            self.write_only,
        )
        if self.default:
            doc["default"] = self.encode_value(self.default)
        return doc

    def encode_value(self, val: str) -> bool:
        lowered = val.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise ValueError(f"invalid boolean: '{lowered}'")


@dataclass(eq=True)
class Integer(Schema):
    title: str = ""
    description: str = ""
    min: int = 0
    max: int = 0
    default: str = ""
    nullable: bool = False
    read_only: bool = False
    write_only: bool = False
    kind: IntType = INT

    def encode(self, ctx: EncoderContext) -> dict[str, Any]:
        doc = _common(
            "integer",
            self.title,
            self.description,
            self.nullable,
            self.read_only,
            self.write_only,
        )
        if self.default:
            doc["default"] = self.encode_value(self.default)
        doc["minimum"] = self.min
        doc["maximum"] = self.max
        return doc

    def encode_value(self, val: str) -> int:
        return create_scanner(self.kind)(val)


@dataclass(eq=True)
class Number(Schema):
    title: str = ""
    description: str = ""
    min: float = 0.0
    max: float = 0.0
    default: str = ""
    nullable: bool = False
    read_only: bool = False
    write_only: bool = False

    def encode(self, ctx: EncoderContext) -> dict[str, Any]:
        doc = _common(
            "number",
            self.title,
            self.description,
            self.nullable,
            self.read_only,
            self.write_only,
        )
        if self.default:
            doc["default"] = self.encode_value(self.default)
        doc["minimum"] = float(self.min)
        doc["maximum"] = float(self.max)
        return doc

    def encode_value(self, val: str) -> float:
        return create_scanner(float)(val)


@dataclass(eq=True)
class ObjectProperty:
    name: str
    schema: Schema | None = None


@dataclass(eq=True)
class Object(Schema):
    title: str = ""
    description: str = ""
    required: list[str] = field(default_factory=list)
    properties: list[ObjectProperty] = field(default_factory=list)
    nullable: bool = False
    read_only: bool = False
    write_only: bool = False

    def encode(self, ctx: EncoderContext) -> dict[str, Any]:
        doc = _common(
            "object",
            self.title,
            self.description,
            self.nullable,
            self.read_only,
            self.write_only,
        )
        if self.required:
            doc["required"] = list(self.required)
        if self.properties:
            doc["properties"] = {
                prop.name: encode_schema(ctx, prop.schema) for prop in self.properties
            }
        return doc

    def encode_value(self, val: str) -> Any:
        raise ValueError("default objects not supported")


@dataclass(eq=True)
class Ref(Schema):
    """A named schema, encoded as a reference into the document's components."""

    name: str = ""
    schema: Schema | None = None

    @property
    def title(self) -> str:  # type: ignore[override]
        return self.name

    def _target(self) -> Schema:
        if self.schema is None:
            raise ValueError(f"reference '{self.name}' has no schema")
        return self.schema

    def encode(self, ctx: EncoderContext) -> dict[str, Any]:
        ctx.add_ref(self)
        if not self.name:
            return {}
        return {"$ref": REF_PREFIX + self.name}

    def encode_value(self, val: str) -> Any:
        return self._target().encode_value(val)

    def hash(self) -> int:
        return self._target().hash()


@dataclass(eq=True)
class Custom(Schema):
    """A schema served with its own content type instead of JSON."""

    content_type: str = ""
    schema: Schema | None = None

    @property
    def title(self) -> str:  # type: ignore[override]
        return self.schema.title if self.schema is not None else ""

    def _target(self) -> Schema:
        if self.schema is None:
            raise ValueError("custom schema has no inner schema")
        return self.schema

    def encode(self, ctx: EncoderContext) -> dict[str, Any]:
        return self._target().encode(ctx)

    def encode_value(self, val: str) -> Any:
        return self._target().encode_value(val)

    def hash(self) -> int:
        return self._target().hash()