"""
Type Canonicalizer - Maps raw schema type tokens to display types.

The mapping is open: tokens outside the alias table pass through verbatim so
new upstream type names show up in documentation instead of breaking it.
"""

from enum import Enum
from typing import Optional


class CanonicalType(str, Enum):
    """Known canonical display types. Any other string is a pass-through type."""
    STRING = "string"
    INT = "int"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    OBJECT = "obj"
    ARRAY_OBJECT = "[]obj"


ARRAY_PREFIX = "[]"

# Internal marker set by the field parser for arrays whose items are objects
ARRAY_OBJECT = "array_object"

# Marker for arrays whose item type could not be determined
ARRAY_UNKNOWN = "array"

TYPE_ALIASES = {
    "object": CanonicalType.OBJECT.value,
    ARRAY_OBJECT: CanonicalType.ARRAY_OBJECT.value,
    "int": CanonicalType.INT.value,
    "int64": CanonicalType.INT.value,
    "int32": CanonicalType.INT.value,
    "uint64": CanonicalType.INT.value,
    "uint32": CanonicalType.INT.value,
    "integer": CanonicalType.INT.value,
    "time.Time": CanonicalType.DATETIME.value,
    "bool": CanonicalType.BOOLEAN.value,
}


def canonicalize(token: Optional[str]) -> str:
    """
    Map a raw type token to its canonical display type

    Args:
        token: Raw type token (e.g. "uint64", "[]int32", "object")

    Returns:
        Canonical type; unknown tokens are returned unchanged
    """
    if token is None:
        return ""

    mapped = TYPE_ALIASES.get(token)
    if mapped is not None:
        return mapped

    if token.startswith(ARRAY_PREFIX):
        base = token[len(ARRAY_PREFIX):]
        mapped = TYPE_ALIASES.get(base)
        if mapped is not None:
            return ARRAY_PREFIX + mapped

    return token


def is_array_type(canonical: str) -> bool:
    """Check if a canonical type denotes an array of scalars or objects"""
    return canonical.startswith(ARRAY_PREFIX)


def element_type(canonical: str) -> str:
    """Element type of an array type ("[]int" -> "int"); "" if not an array"""
    if not is_array_type(canonical):
        return ""
    return canonical[len(ARRAY_PREFIX):]
