"""
Schema Introspection Module

Turns loosely-typed JSON field descriptions into canonical FieldSpec trees.
Supports:
- Type token canonicalization (aliases, array markers, pass-through)
- Nested object/array structure parsing
- Array-of-object vs array-of-scalar disambiguation
- Recursion depth guard

The section-level orchestrator lives in schemadoc.introspection.schema_walker.
"""

from .errors import SchemaError, SchemaTooDeepError, DocumentLoadError, ExampleSerializationError
from .type_canonicalizer import CanonicalType, canonicalize
from .field_parser import FieldParser, parse_field

__all__ = [
    "SchemaError",
    "SchemaTooDeepError",
    "DocumentLoadError",
    "ExampleSerializationError",
    "CanonicalType",
    "canonicalize",
    "FieldParser",
    "parse_field",
]
