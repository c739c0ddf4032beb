"""OpenAPI to Zod Generator

A Python package for generating Zod validator code from the
components.schemas of an OpenAPI document. Handles self-referencing and
mutually recursive schemas with deferred references.
"""

__version__ = "1.0.0"

from .loader import load_spec
from .pipeline import (
    AtomicWriter,
    CodeGenerationError,
    CodeGeneratorConfig,
    OutputConfig,
    OutputMode,
    OutputValidationError,
    PipelineGenerator,
    SpecLoadError,
    UnsupportedCheckError,
    codegen,
)
from .pipeline.converter import convert_openapi_spec

__all__ = [
    "PipelineGenerator",
    "codegen",
    "convert_openapi_spec",
    "load_spec",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "CodeGenerationError",
    "OutputValidationError",
    "SpecLoadError",
    "UnsupportedCheckError",
    "AtomicWriter",
]
