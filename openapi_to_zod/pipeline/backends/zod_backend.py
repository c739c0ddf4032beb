"""
Zod code generation backend.

Renders each named schema of a registry as a TypeScript declaration
building the equivalent Zod validator. Schemas already declared are referred
to by identifier; schemas still in progress or declared later are wrapped in
z.lazy() so cyclic references stay valid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ...utils import format_object_key, format_value, indent
from ..analyzer.dependency_analyzer import body_of, dependencies_of
from ..analyzer.sequencer import sequence
from ..errors import CodeGenerationError, UnsupportedCheckError
from ..schema_model.nodes import (
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
)
from .base import CodeBackend

logger = logging.getLogger(__name__)


@dataclass
class GenerationState:
    """Progress of one generation run."""

    generated: set[str] = field(default_factory=set)
    in_progress: set[str] = field(default_factory=set)

    def is_declared(self, name: str) -> bool:
        """Whether name can be referenced directly at this point of the output."""
        return name in self.generated and name not in self.in_progress


def _literal_value(node: SchemaNode) -> tuple[bool, Any]:
    if isinstance(node, LiteralNode):
        return True, node.value
    if isinstance(node, EnumNode) and len(node.values) == 1:
        return True, node.values[0]
    return False, None


class ZodBackend(CodeBackend):
    """Zod (TypeScript) code generation backend."""

    TEMPLATE_LANG = "zod"
    FILE_EXTENSION = "ts"

    def generate(self, order: list[str] | None = None) -> str:
        """Generate the declarations of all named schemas."""
        if order is None:
            order = sequence(dependencies_of(self.registry))

        state = GenerationState()
        declarations = []
        for name in order:
            schema = self.registry.get(name)
            if schema is None:
                raise CodeGenerationError(f'Schema "{name}" is not in the registry')
            if name in state.generated:
                continue
            state.in_progress.add(name)
            expression = self.render(body_of(schema), state, name)
            state.in_progress.discard(name)
            state.generated.add(name)

            identifier = self.config.schema_identifier(name)
            declarations.append(self.declaration_template.render(identifier=identifier, expression=expression))
            logger.debug("Generated %s", identifier)

        preamble = self.prefix_template.render(zod_module=self.config.zod_module)
        return preamble + "\n\n" + "\n\n".join(declarations)

    def render(self, node: SchemaNode, state: GenerationState, path: str) -> str:
        """
        Render a schema node as a Zod expression.

        Args:
            node: The node to render
            state: Progress of the current run
            path: Location of the node, used in error messages

        Returns:
            TypeScript expression string
        """
        if isinstance(node, LazyNode):
            return self._render_reference(node.name, state)
        if isinstance(node, ObjectNode):
            return self._render_object(node, state, path)
        if isinstance(node, ArrayNode):
            return f"z.array({self.render(node.element, state, f'{path}.element')})"
        if isinstance(node, UnionNode):
            return self._render_union(node, state, path)
        if isinstance(node, StringNode):
            return self._render_string(node, path)
        if isinstance(node, NumberNode):
            return "z.number()"
        if isinstance(node, BooleanNode):
            return "z.boolean()"
        if isinstance(node, EnumNode):
            if len(node.values) == 1:
                return f"z.literal({format_value(node.values[0])})"
            return f"z.enum([{', '.join(format_value(v) for v in node.values)}])"
        if isinstance(node, LiteralNode):
            return f"z.literal({format_value(node.value)})"
        if isinstance(node, NullableNode):
            return f"{self.render(node.inner, state, path)}.nullable()"
        if isinstance(node, OptionalNode):
            return f"{self.render(node.inner, state, path)}.optional()"
        if isinstance(node, NeverNode):
            return "z.never()"
        return "z.unknown()"

    def _render_reference(self, name: str, state: GenerationState) -> str:
        identifier = self.config.schema_identifier(name)
        if state.is_declared(name):
            return identifier
        return f"z.lazy(() => {identifier})"

    def _render_object(self, node: ObjectNode, state: GenerationState, path: str) -> str:
        if not node.properties:
            return "z.object({})"
        properties = ",\n".join(
            f"{format_object_key(key)}: {self.render(value, state, f'{path}.{key}')}" for key, value in node.properties.items()
        )
        return f"z.object({{\n{indent(properties)}\n}})"

    def _render_union(self, node: UnionNode, state: GenerationState, path: str) -> str:
        options = ", ".join(self.render(option, state, f"{path}.union.{index}") for index, option in enumerate(node.options))
        discriminator = self._find_discriminator(node, state)
        if discriminator is not None:
            return f"z.discriminatedUnion({format_value(discriminator)}, [{options}])"
        return f"z.union([{options}])"

    def _find_discriminator(self, node: UnionNode, state: GenerationState) -> str | None:
        """Return the tag key shared by all options, or None for a plain union.

        Every option must be an object with exactly one literal-valued
        property, all under the same key and with distinct values. A named
        option must already be declared, since z.discriminatedUnion() needs
        the object schemas themselves rather than lazy wrappers.
        """
        if len(node.options) < 2:
            return None

        key = None
        seen_values: list[Any] = []
        for option in node.options:
            if isinstance(option, LazyNode):
                if not state.is_declared(option.name):
                    return None
                option = option.resolve()
            if not isinstance(option, ObjectNode):
                return None

            tags = [(k, _literal_value(v)[1]) for k, v in option.properties.items() if _literal_value(v)[0]]
            if len(tags) != 1:
                return None
            tag_key, tag_value = tags[0]
            if key is None:
                key = tag_key
            elif tag_key != key:
                return None
            if any(type(v) is type(tag_value) and v == tag_value for v in seen_values):
                return None
            seen_values.append(tag_value)
        return key

    def _render_string(self, node: StringNode, path: str) -> str:
        result = "z.string()"
        for check in node.checks:
            if check.kind == "min":
                result += f".min({check.value})"
            elif check.kind == "max":
                result += f".max({check.value})"
            elif check.kind == "date":
                result += ".date()"
            else:
                raise UnsupportedCheckError(check.kind, path)
        return result
