"""
Runtime validation of instances against the Schema Model.

Mirrors the parsing behaviour of the Zod validators the code generator
emits, so a converted registry can validate decoded JSON directly. Each
node kind is checked by a small rule function registered in _RULES.
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .nodes import (
    ArrayNode,
    BooleanNode,
    EnumNode,
    LazyNode,
    LiteralNode,
    NeverNode,
    NullableNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    SchemaNode,
    StringNode,
    UnionNode,
    UnknownNode,
)

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class _Missing:
    """Marker for an absent object property (distinct from null)."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation failure."""

    path: tuple[str | int, ...] = ()
    message: str = ""

    def __str__(self) -> str:
        location = ".".join(str(p) for p in self.path) or "<root>"
        return f"{location}: {self.message}"


@dataclass
class ParseResult:
    """Outcome of safe_parse()."""

    success: bool = False
    data: Any = None
    issues: list[ValidationIssue] = field(default_factory=list)


class SchemaParseError(ValueError):
    """Raised by parse() when an instance does not match its schema."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("; ".join(str(issue) for issue in issues))


def _type_name(value: Any) -> str:
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    return type(value).__name__


def _same_value(expected: Any, value: Any) -> bool:
    # True == 1 in Python; a literal only matches a value of the same kind
    return type(expected) is type(value) and expected == value


def _validate_string(node: StringNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    if not isinstance(value, str):
        return value, [ValidationIssue(path, f"Expected string, received {_type_name(value)}")]
    issues = []
    for check in node.checks:
        if check.kind == "min" and len(value) < check.value:
            issues.append(ValidationIssue(path, f"String must contain at least {check.value} character(s)"))
        elif check.kind == "max" and len(value) > check.value:
            issues.append(ValidationIssue(path, f"String must contain at most {check.value} character(s)"))
        elif check.kind == "date" and not _is_date(value):
            issues.append(ValidationIssue(path, "Invalid date"))
    return value, issues


def _is_date(value: str) -> bool:
    if not _DATE_PATTERN.match(value):
        return False
    try:
        datetime.date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _validate_number(node: NumberNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return value, [ValidationIssue(path, f"Expected number, received {_type_name(value)}")]
    return value, []


def _validate_boolean(node: BooleanNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    if not isinstance(value, bool):
        return value, [ValidationIssue(path, f"Expected boolean, received {_type_name(value)}")]
    return value, []


def _validate_object(node: ObjectNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    if not isinstance(value, Mapping):
        return value, [ValidationIssue(path, f"Expected object, received {_type_name(value)}")]
    data = {}
    issues = []
    for key, prop_schema in node.properties.items():
        prop_value = value.get(key, MISSING)
        parsed, prop_issues = validate(prop_schema, prop_value, path + (key,))
        issues.extend(prop_issues)
        if parsed is not MISSING:
            data[key] = parsed
    # Undeclared keys are stripped
    return data, issues


def _validate_array(node: ArrayNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    if not isinstance(value, (list, tuple)):
        return value, [ValidationIssue(path, f"Expected array, received {_type_name(value)}")]
    data = []
    issues = []
    for index, item in enumerate(value):
        parsed, item_issues = validate(node.element, item, path + (index,))
        data.append(parsed)
        issues.extend(item_issues)
    return data, issues


def _validate_union(node: UnionNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    for option in node.options:
        parsed, issues = validate(option, value, path)
        if not issues:
            return parsed, []
    return value, [ValidationIssue(path, "Invalid input: no union option matched")]


def _validate_enum(node: EnumNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    if any(_same_value(expected, value) for expected in node.values):
        return value, []
    expected = " | ".join(repr(v) for v in node.values)
    return value, [ValidationIssue(path, f"Invalid enum value. Expected {expected}, received {value!r}")]


def _validate_literal(node: LiteralNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    if _same_value(node.value, value):
        return value, []
    return value, [ValidationIssue(path, f"Invalid literal value, expected {node.value!r}")]


def _validate_nullable(node: NullableNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    if value is None:
        return None, []
    return validate(node.inner, value, path)


def _validate_optional(node: OptionalNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    if value is MISSING:
        return MISSING, []
    return validate(node.inner, value, path)


def _validate_lazy(node: LazyNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    return validate(node.resolve(), value, path)


def _validate_never(node: NeverNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    return value, [ValidationIssue(path, f"Expected never, received {_type_name(value)}")]


def _validate_unknown(node: UnknownNode, value: Any, path: tuple) -> tuple[Any, list[ValidationIssue]]:
    return value, []


_RULES: dict[type, Callable[[Any, Any, tuple], tuple[Any, list[ValidationIssue]]]] = {
    StringNode: _validate_string,
    NumberNode: _validate_number,
    BooleanNode: _validate_boolean,
    ObjectNode: _validate_object,
    ArrayNode: _validate_array,
    UnionNode: _validate_union,
    EnumNode: _validate_enum,
    LiteralNode: _validate_literal,
    NullableNode: _validate_nullable,
    OptionalNode: _validate_optional,
    LazyNode: _validate_lazy,
    NeverNode: _validate_never,
    UnknownNode: _validate_unknown,
}


def validate(node: SchemaNode, value: Any, path: tuple = ()) -> tuple[Any, list[ValidationIssue]]:
    """
    Validate a value against a schema node.

    Args:
        node: The schema to validate against
        value: The instance, or MISSING for an absent property
        path: Location of the value inside the root instance

    Returns:
        Tuple of (parsed value, list of issues); the list is empty on success
    """
    rule = _RULES.get(type(node))
    if rule is None:
        raise TypeError(f"Cannot validate against {type(node).__name__}")
    if value is MISSING and not isinstance(node, (OptionalNode, UnknownNode, LazyNode)):
        return value, [ValidationIssue(path, "Required")]
    return rule(node, value, path)


def safe_parse(node: SchemaNode, value: Any) -> ParseResult:
    """Validate a value, reporting failures in the result instead of raising."""
    data, issues = validate(node, value)
    if issues:
        return ParseResult(success=False, data=None, issues=issues)
    return ParseResult(success=True, data=data)


def parse(node: SchemaNode, value: Any) -> Any:
    """Validate a value and return the parsed data.

    Raises:
        SchemaParseError: If the value does not match the schema
    """
    result = safe_parse(node, value)
    if not result.success:
        raise SchemaParseError(result.issues)
    return result.data
