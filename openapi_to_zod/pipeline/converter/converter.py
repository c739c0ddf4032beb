"""
OpenAPI schema converter.

Phase 1 of the pipeline: translate components.schemas into Schema Model
nodes. Every named schema is wrapped in a LazyNode so references, including
cyclic ones, never require eager conversion of their target.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from ..schema_model.nodes import (
    ArrayNode,
    BooleanNode,
    LazyNode,
    NeverNode,
    NullableNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    SchemaNode,
    SchemaRegistry,
    StringCheck,
    StringNode,
    UnionNode,
    UnknownNode,
    make_enum,
)
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)


def get_schemas(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract component schemas from the spec."""
    return (spec.get("components") or {}).get("schemas") or {}


class SchemaConverter:
    """Converts the schemas of an OpenAPI document into a SchemaRegistry."""

    def __init__(self, spec: dict[str, Any]):
        """
        Initialize the converter.

        Args:
            spec: The OpenAPI document (only components.schemas is read)
        """
        self.spec = spec
        self.definitions = get_schemas(spec)
        self.ref_resolver = ReferenceResolver(self.definitions)
        self.registry = SchemaRegistry()

    def convert(self) -> SchemaRegistry:
        """
        Register every named schema as a LazyNode.

        Returns:
            The registry, in source declaration order
        """
        for name, definition in self.definitions.items():
            if isinstance(definition, dict):
                self.registry.schemas[name] = self._make_lazy(name, definition)
        return self.registry

    def _make_lazy(self, name: str, definition: dict[str, Any]) -> LazyNode:
        getter = functools.cache(functools.partial(self._convert_schema, definition))
        return LazyNode(name=name, getter=getter)

    def _convert_schema(self, schema: dict[str, Any]) -> SchemaNode:
        node = self._convert_base(schema)
        if schema.get("nullable"):
            return NullableNode(inner=node)
        return node

    def _convert_base(self, schema: dict[str, Any]) -> SchemaNode:
        if "$ref" in schema:
            return self._handle_ref(schema["$ref"])
        if "allOf" in schema:
            return self._handle_all_of(schema["allOf"])
        if "anyOf" in schema:
            return self._handle_any_of(schema["anyOf"])
        # oneOf gets the same inclusive union as anyOf
        if "oneOf" in schema:
            return self._handle_any_of(schema["oneOf"])

        schema_type = schema.get("type")
        if schema_type == "object":
            return self._convert_object_schema(schema)
        if schema_type == "array":
            return self._convert_array_schema(schema)
        if schema_type == "string":
            return self._convert_string_schema(schema)
        if schema_type in ("number", "integer"):
            return NumberNode()
        if schema_type == "boolean":
            return BooleanNode()
        return UnknownNode()

    def _handle_ref(self, ref_path: str) -> SchemaNode:
        resolved = self.ref_resolver.resolve(ref_path)
        name = resolved.target_name
        if name not in self.registry:
            if resolved.target_definition is None:
                logger.warning('Referenced schema "%s" not found in spec', name)
                return UnknownNode()
            self.registry.schemas[name] = self._make_lazy(name, resolved.target_definition)
        return self.registry.schemas[name]

    def _handle_all_of(self, schemas: list[dict[str, Any]]) -> SchemaNode:
        # Only object members are merged; anything else is dropped
        merged: dict[str, Any] = {"type": "object", "properties": {}, "required": []}
        for schema in schemas:
            if schema.get("type") != "object":
                continue
            if schema.get("properties"):
                merged["properties"] = {**merged["properties"], **schema["properties"]}
            if schema.get("required"):
                merged["required"] = merged["required"] + list(schema["required"])
        return self._convert_object_schema(merged)

    def _handle_any_of(self, schemas: list[dict[str, Any]]) -> SchemaNode:
        options = [self._convert_schema(s) for s in schemas]
        if not options:
            return NeverNode()
        if len(options) == 1:
            return options[0]
        return UnionNode(options=tuple(options))

    def _convert_object_schema(self, schema: dict[str, Any]) -> ObjectNode:
        required = frozenset(schema.get("required") or [])
        properties: dict[str, SchemaNode] = {}
        for key, value in (schema.get("properties") or {}).items():
            if value is None:
                continue
            field_schema = self._convert_schema(value)
            properties[key] = field_schema if key in required else OptionalNode(inner=field_schema)
        return ObjectNode(properties=properties, required=required)

    def _convert_array_schema(self, schema: dict[str, Any]) -> ArrayNode:
        items = schema.get("items")
        element = self._convert_schema(items) if items else UnknownNode()
        return ArrayNode(element=element)

    def _convert_string_schema(self, schema: dict[str, Any]) -> SchemaNode:
        if "enum" in schema:
            return make_enum(schema["enum"])

        checks = []
        if "minLength" in schema:
            checks.append(StringCheck(kind="min", value=schema["minLength"]))
        if "maxLength" in schema:
            checks.append(StringCheck(kind="max", value=schema["maxLength"]))
        if schema.get("format") == "date":
            checks.append(StringCheck(kind="date"))
        return StringNode(checks=tuple(checks))


def convert_openapi_spec(spec: dict[str, Any]) -> SchemaRegistry:
    """Convert the schemas of an OpenAPI document into a fresh registry."""
    return SchemaConverter(spec).convert()
