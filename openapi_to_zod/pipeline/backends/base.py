"""
Base class for code generation backends.

Defines the interface that target-language backends implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..config import CodeGeneratorConfig
from ..schema_model.nodes import SchemaRegistry


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, registry: SchemaRegistry, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            registry: The converted named schemas
            config: Code generation configuration
        """
        self.registry = registry
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.declaration_template = self.jinja_env.get_template(f"declaration.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(self, order: list[str] | None = None) -> str:
        """
        Generate code for every named schema.

        Args:
            order: Declaration order; computed from dependencies when None

        Returns:
            Generated code as a string
        """
