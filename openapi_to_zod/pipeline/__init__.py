"""
Pipeline - OpenAPI schemas to Zod code generator.

This module provides a multi-phase architecture for generating Zod
validators from the components.schemas of an OpenAPI document:

1. Phase 1 (Converter): Convert schemas into the Schema Model, one lazy node per named schema
2. Phase 2 (Analyzer): Collect the named schemas each schema references
3. Phase 3 (Sequencer): Order declarations so dependencies come first
4. Phase 4 (Backend): Render declarations, deferring references a cycle makes unavoidable
5. Phase 5 (Writer): Optional atomic write of the generated code
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, OutputConfig, OutputMode
from .errors import CodeGenerationError, OutputValidationError, SpecLoadError, UnsupportedCheckError
from .generator import PipelineGenerator, codegen
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "codegen",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "CodeGenerationError",
    "OutputValidationError",
    "SpecLoadError",
    "UnsupportedCheckError",
    "AtomicWriter",
]
