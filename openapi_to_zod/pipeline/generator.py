"""
Pipeline generator.

Runs the phases of the pipeline on one OpenAPI document:
convert -> analyze dependencies -> sequence -> render.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .analyzer import dependencies_of, sequence
from .backends import ZodBackend
from .config import CodeGeneratorConfig, OutputMode
from .converter import convert_openapi_spec
from .schema_model import SchemaRegistry
from .writer import AtomicWriter


class PipelineGenerator:
    """Generates Zod schema code from an OpenAPI document."""

    def __init__(self, spec: dict[str, Any], config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            spec: The OpenAPI document
            config: Code generation configuration
        """
        self.spec = spec
        self.config = config or CodeGeneratorConfig()

    def convert(self) -> SchemaRegistry:
        """Convert the document's schemas into a fresh registry."""
        return convert_openapi_spec(self.spec)

    def generate(self) -> str:
        """
        Generate the code for every schema of the document.

        Returns:
            Import preamble followed by one declaration per schema

        Raises:
            UnsupportedCheckError: If a string constraint cannot be rendered
        """
        registry = self.convert()
        order = sequence(dependencies_of(registry))
        return ZodBackend(registry, self.config).generate(order)

    def generate_to_file(self, path: Path) -> None:
        """
        Generate code and write it according to the output configuration.

        Raises:
            FileExistsError: If the file exists and mode is not force
            OutputValidationError: If the generated code fails validation
        """
        code = self.generate()
        output = self.config.output
        if output.atomic_write:
            writer = AtomicWriter(self.config.zod_module)
            if output.mode == OutputMode.ERROR_IF_EXISTS:
                writer.write_if_not_exists(path, code, validate=output.validate_before_write)
            else:
                writer.write(path, code, validate=output.validate_before_write)
            return

        if output.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")
        path.write_text(code, encoding="utf-8")


def codegen(spec: dict[str, Any], prefix: str = "") -> str:
    """Generate Zod schema code for an OpenAPI document."""
    return PipelineGenerator(spec, CodeGeneratorConfig(prefix=prefix)).generate()
