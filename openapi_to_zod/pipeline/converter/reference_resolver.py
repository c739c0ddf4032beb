"""
Reference resolver for $ref resolution.

Resolves $ref paths to the schema definitions of the OpenAPI document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ResolvedRef:
    """A resolved $ref."""

    target_name: str = ""  # Name of the referenced schema
    target_definition: dict[str, Any] | None = None  # None when the target is missing


class ReferenceResolver:
    """Resolves $ref to entries of components.schemas."""

    def __init__(self, definitions: dict[str, Any]):
        """
        Initialize the resolver.

        Args:
            definitions: The components.schemas mapping
        """
        self.definitions = definitions

    def resolve(self, ref_path: str) -> ResolvedRef:
        """
        Resolve a $ref path to its target.

        Only the trailing path segment is significant, e.g.
        "#/components/schemas/User" -> "User".

        Args:
            ref_path: The $ref value

        Returns:
            ResolvedRef with target information
        """
        target_name = ref_path.split("/")[-1]
        definition = self.definitions.get(target_name)
        if not isinstance(definition, dict):
            definition = None
        return ResolvedRef(target_name=target_name, target_definition=definition)
