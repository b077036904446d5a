"""The OpenAPI root document with its paths, operations and parameters."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, TextIO

from papi.iterate import sorted_items
from papi.openapi.context import EncoderContext
from papi.openapi.info import (
    Info,
    ParameterIn,
    SecurityRequirement,
    SecurityScheme,
    Server,
    Tag,
)
from papi.openapi.schema import Array, Custom, Schema, encode_schema

VERSION = "3.0.0"

_JSON_CONTENT_TYPE = "application/json"


def _content_type(schema: Schema | None) -> str:
    if isinstance(schema, Custom):
        return schema.content_type
    return _JSON_CONTENT_TYPE


@dataclass
class Parameter:
    """An operation parameter located in the path, query, header or a cookie."""

    name: str
    in_: ParameterIn | str = ParameterIn.QUERY
    description: str = ""
    schema: Schema | None = None
    required: bool = False

    def to_dict(self, ctx: EncoderContext) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "name": self.name,
            "in": str(self.in_),
            "description": self.description,
            "required": self.required,
        }
        if isinstance(self.schema, Array):
            doc["explode"] = False
        doc["schema"] = encode_schema(ctx, self.schema)
        return doc


@dataclass
class Operation:
    """A single HTTP method on a path."""

    id: str = ""
    method: str = ""
    summary: str = ""
    description: str = ""
    security: list[SecurityRequirement] = field(default_factory=list)
    parameters: list[Parameter] = field(default_factory=list)
    request_body: Schema | None = None
    response: Schema | None = None
    tags: list[Tag] = field(default_factory=list)

    def to_dict(self, ctx: EncoderContext) -> dict[str, Any]:
        """The operation object; its tags and references are recorded in ``ctx``."""
        doc: dict[str, Any] = {"summary": self.summary}
        if self.description:
            doc["description"] = self.description
        doc["operationId"] = self.id

        if self.security:
            doc["security"] = [{req.name: req.to_list()} for req in self.security]

        if self.parameters:
            doc["parameters"] = [param.to_dict(ctx) for param in self.parameters]

        if self.tags:
            for tag in self.tags:
                ctx.add_tag(tag)
            doc["tags"] = [tag.name for tag in self.tags]

        if self.method not in ("get", "GET"):
            doc["requestBody"] = {
                "content": {
                    _content_type(self.request_body): {
                        "schema": encode_schema(ctx, self.request_body)
                    }
                }
            }

        title = self.response.title if self.response is not None else ""
        doc["responses"] = {
            "200": {
                "description": title or "Response",
                "content": {
                    _content_type(self.response): {
                        "schema": encode_schema(ctx, self.response)
                    }
                },
            }
        }
        return doc


class Paths(dict):
    """Operations grouped by path."""

    def add_operation(self, path: str, op: Operation) -> None:
        """Add ``op`` to ``path``; a method may occur only once per path."""
        if any(existing.method == op.method for existing in self.get(path, ())):
            raise ValueError(f"duplicate method '{op.method}' for path: {path}")
        self.setdefault(path, []).append(op)

    def to_dict(self, ctx: EncoderContext) -> dict[str, Any]:
        """Paths ordered by name, each mapping lower-case methods to operations."""
        return {
            path: {op.method.lower(): op.to_dict(ctx) for op in ops}
            for path, ops in sorted_items(self)
        }


class Document:
    """An OpenAPI root document to be filled with the API's operations."""

    def __init__(self, info: Info, *servers: Server) -> None:
        self.info = info
        self.servers: list[Server] = list(servers)
        self.paths = Paths()
        self.security_schemes: list[SecurityScheme] = []

    def num_operations(self) -> int:
        """Number of paths that have operations."""
        return len(self.paths)

    def add_operation(self, path: str, op: Operation) -> None:
        self.paths.add_operation(path, op)

    def add_security_scheme(self, scheme: SecurityScheme) -> None:
        """Add ``scheme``; its name must not already be in use."""
        if any(s.scheme_name == scheme.scheme_name for s in self.security_schemes):
            raise ValueError(
                f"a security scheme with name '{scheme.scheme_name}' does already exist"
            )
        self.security_schemes.append(scheme)

    def to_dict(self) -> dict[str, Any]:
        """The whole document as a JSON-ready dict."""
        ctx = EncoderContext()
        doc: dict[str, Any] = {"openapi": VERSION, "info": self.info.to_dict()}
        if self.servers:
            doc["servers"] = [server.to_dict() for server in self.servers]
        doc["paths"] = self.paths.to_dict(ctx)

        components: dict[str, Any] = {}
        if self.security_schemes:
            components["securitySchemes"] = {
                scheme.scheme_name: scheme.to_dict() for scheme in self.security_schemes
            }
        if ctx.refs:
            components["schemas"] = {
                ref.name: encode_schema(ctx, ref.schema) for _, ref in ctx.all_refs()
            }
        doc["components"] = components

        if ctx.tags:
            doc["tags"] = [tag.to_dict() for _, tag in sorted_items(ctx.tags)]
        return doc

    def write_json(self, fp: TextIO) -> None:
        """Write the document as indented JSON to a text stream."""
        json.dump(self.to_dict(), fp, indent=4)