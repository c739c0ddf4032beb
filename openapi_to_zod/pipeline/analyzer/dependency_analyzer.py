"""
Dependency analysis between named schemas.

Phase 2 of the pipeline: for every named schema, list the other named
schemas its body refers to. Lazy nodes are recorded by name and never
expanded, so the walk is bounded and cycles become finite edges.
"""

from __future__ import annotations

from ..schema_model.nodes import (
    ArrayNode,
    LazyNode,
    NullableNode,
    ObjectNode,
    OptionalNode,
    SchemaNode,
    SchemaRegistry,
    UnionNode,
)

DependencyMap = dict[str, list[str]]


def _collect(node: SchemaNode, found: list[str]) -> None:
    if isinstance(node, LazyNode):
        if node.name not in found:
            found.append(node.name)
    elif isinstance(node, ObjectNode):
        for value in node.properties.values():
            _collect(value, found)
    elif isinstance(node, ArrayNode):
        _collect(node.element, found)
    elif isinstance(node, UnionNode):
        for option in node.options:
            _collect(option, found)
    elif isinstance(node, (NullableNode, OptionalNode)):
        _collect(node.inner, found)


def body_of(node: SchemaNode) -> SchemaNode:
    """Return the definition behind a registry entry."""
    return node.resolve() if isinstance(node, LazyNode) else node


def dependencies_of(registry: SchemaRegistry) -> DependencyMap:
    """
    Compute the dependency map of a registry.

    Args:
        registry: The converted named schemas

    Returns:
        Name to the ordered, de-duplicated list of names its body references.
        A schema that refers to itself lists its own name.
    """
    dependencies: DependencyMap = {}
    for entry in registry.items:
        found: list[str] = []
        _collect(body_of(entry.schema), found)
        dependencies[entry.name] = found
    return dependencies
