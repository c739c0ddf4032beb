"""
Exceptions raised by the code generation pipeline.
"""


class CodeGenerationError(Exception):
    """Base error for spec loading, generation and output failures."""


class UnsupportedCheckError(CodeGenerationError):
    """Raised when a string constraint has no Zod rendering."""

    def __init__(self, kind: str, path: str = ""):
        self.kind = kind
        self.path = path
        location = f" (at {path})" if path else ""
        super().__init__(f"unsupported check kind: {kind}{location}")


class SpecLoadError(CodeGenerationError):
    """Raised when an OpenAPI document cannot be read or parsed."""


class OutputValidationError(CodeGenerationError):
    """Raised when generated code fails validation before being written."""
