"""
Utility functions for the OpenAPI to Zod generator.
"""

import json
import re
from typing import Any

# Keys matching this pattern can be written unquoted in an object literal
_IDENTIFIER_PATTERN = re.compile(r"^[$A-Za-z_][\w$]*$", re.ASCII)


def format_object_key(key: str) -> str:
    """Quote an object key unless it is a bare identifier.

    Examples:
        name -> name
        $ref -> $ref
        deep-Prop -> "deep-Prop"
        2d -> "2d"
    """
    if _IDENTIFIER_PATTERN.match(key):
        return key
    return json.dumps(key)


def format_value(value: Any) -> str:
    """Render a JSON value as a TypeScript literal (strings double-quoted)."""
    return json.dumps(value)


def indent(code: str, level: int = 1) -> str:
    """Indent every line of code by two spaces per level."""
    spaces = "  " * level
    return "\n".join(spaces + line for line in code.split("\n"))
