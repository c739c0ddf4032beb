"""
Schema Model - language-agnostic validator representation.
"""

from .nodes import (
    ArrayNode,
    BooleanNode,
    EnumNode,
    LazyNode,
    LiteralNode,
    NamedSchema,
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
from .validation import MISSING, ParseResult, SchemaParseError, ValidationIssue, parse, safe_parse

__all__ = [
    "SchemaNode",
    "StringCheck",
    "StringNode",
    "NumberNode",
    "BooleanNode",
    "ObjectNode",
    "ArrayNode",
    "UnionNode",
    "EnumNode",
    "LiteralNode",
    "NullableNode",
    "OptionalNode",
    "LazyNode",
    "NeverNode",
    "UnknownNode",
    "make_enum",
    "NamedSchema",
    "SchemaRegistry",
    "MISSING",
    "ParseResult",
    "SchemaParseError",
    "ValidationIssue",
    "parse",
    "safe_parse",
]
