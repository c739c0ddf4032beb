"""
Converter - OpenAPI components.schemas to Schema Model.
"""

from .converter import SchemaConverter, convert_openapi_spec, get_schemas
from .reference_resolver import ReferenceResolver, ResolvedRef

__all__ = [
    "SchemaConverter",
    "convert_openapi_spec",
    "get_schemas",
    "ReferenceResolver",
    "ResolvedRef",
]
