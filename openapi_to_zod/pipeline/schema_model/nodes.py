"""
Schema Model node definitions.

These nodes describe a validator independently of the OpenAPI source and of
the generated Zod syntax. Every node is immutable once built; the only node
allowed to close a cycle is LazyNode, which carries the name of the schema it
defers to.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class SchemaNode:
    """Base class for all Schema Model nodes."""


@dataclass(frozen=True)
class StringCheck:
    """A single string constraint, e.g. kind="min", value=1."""

    kind: str = ""
    value: Any = None


@dataclass(frozen=True)
class StringNode(SchemaNode):
    """A string, with constraints recorded in emission order."""

    checks: tuple[StringCheck, ...] = ()


@dataclass(frozen=True)
class NumberNode(SchemaNode):
    """A number (integer and number are not distinguished)."""


@dataclass(frozen=True)
class BooleanNode(SchemaNode):
    """A boolean."""


@dataclass(frozen=True)
class ObjectNode(SchemaNode):
    """An object with ordered properties.

    Attributes:
        properties: Property name to schema, in declaration order. Properties
            that are not required are already wrapped in OptionalNode.
        required: Names listed as required in the source schema
    """

    properties: Mapping[str, SchemaNode] = field(default_factory=dict)
    required: frozenset[str] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        object.__setattr__(self, "required", frozenset(self.required))

    def __hash__(self):
        return hash((tuple(self.properties.items()), self.required))


@dataclass(frozen=True)
class ArrayNode(SchemaNode):
    """An array of a single element type."""

    element: SchemaNode = field(default_factory=lambda: UnknownNode())


@dataclass(frozen=True)
class UnionNode(SchemaNode):
    """An inclusive union; options keep their source order."""

    options: tuple[SchemaNode, ...] = ()


@dataclass(frozen=True)
class EnumNode(SchemaNode):
    """An enumeration of two or more values. Build it with make_enum()."""

    values: tuple[Any, ...] = ()


@dataclass(frozen=True)
class LiteralNode(SchemaNode):
    """A single allowed value."""

    value: Any = None


@dataclass(frozen=True)
class NullableNode(SchemaNode):
    """Accepts null in addition to the inner schema."""

    inner: SchemaNode = field(default_factory=lambda: UnknownNode())


@dataclass(frozen=True)
class OptionalNode(SchemaNode):
    """Accepts an absent value in addition to the inner schema."""

    inner: SchemaNode = field(default_factory=lambda: UnknownNode())


@dataclass(frozen=True)
class LazyNode(SchemaNode):
    """A deferred reference to a named schema.

    The getter is only called on first use and its result is cached by the
    converter, so a named schema is converted at most once. Two lazy nodes
    are equal when they defer to the same name; the body is never compared,
    which keeps equality finite on cyclic schemas.
    """

    name: str = ""
    getter: Callable[[], SchemaNode] = field(default=lambda: UnknownNode(), compare=False, repr=False)

    def resolve(self) -> SchemaNode:
        """Return the schema this node defers to."""
        return self.getter()


@dataclass(frozen=True)
class NeverNode(SchemaNode):
    """Accepts nothing."""


@dataclass(frozen=True)
class UnknownNode(SchemaNode):
    """Accepts anything."""


def make_enum(values: list[Any] | tuple[Any, ...]) -> SchemaNode:
    """Build an enum node, collapsing a single value into a literal."""
    values = tuple(values)
    if len(values) == 1:
        return LiteralNode(value=values[0])
    return EnumNode(values=values)


@dataclass(frozen=True)
class NamedSchema:
    """A named schema entry of the registry."""

    name: str = ""
    schema: SchemaNode = field(default_factory=UnknownNode)


@dataclass
class SchemaRegistry:
    """Named schemas produced by one conversion, in source declaration order."""

    schemas: dict[str, SchemaNode] = field(default_factory=dict)

    @property
    def items(self) -> list[NamedSchema]:
        return [NamedSchema(name=name, schema=schema) for name, schema in self.schemas.items()]

    def names(self) -> list[str]:
        return list(self.schemas)

    def get(self, name: str) -> SchemaNode | None:
        return self.schemas.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.schemas

    def __len__(self) -> int:
        return len(self.schemas)
