"""
Field Parser - Converts raw JSON field definitions into FieldSpec trees.

Supports:
- Scalar fields with free-form type tokens
- Nested objects via "properties"
- Arrays of scalars ("items.type") and arrays of objects ("items.properties")
- Tri-state required markers
- Recursion depth guard
"""

import logging
from typing import Any, Dict, Mapping, Tuple

from schemadoc.schema.models import FieldSpec, Requirement
from .errors import SchemaTooDeepError
from .type_canonicalizer import ARRAY_OBJECT, ARRAY_PREFIX, ARRAY_UNKNOWN, canonicalize

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64

# Highest max_depth that stays within the default interpreter recursion limit
MAX_SUPPORTED_DEPTH = 128

REQUIRED_VALUES = {"true", "required"}
OPTIONAL_VALUES = {"false", "optional"}


def parse_requirement(value: Any) -> Requirement:
    """
    Interpret a raw "required" marker

    Accepts booleans and the strings "true"/"Required" and "false"/"Optional"
    (case-insensitive). Anything else, including an absent marker, is UNKNOWN.
    """
    if isinstance(value, bool):
        return Requirement.REQUIRED if value else Requirement.OPTIONAL

    if isinstance(value, str):
        token = value.strip().lower()
        if token in REQUIRED_VALUES:
            return Requirement.REQUIRED
        if token in OPTIONAL_VALUES:
            return Requirement.OPTIONAL

    if value is not None:
        logger.debug(f"Unrecognized required marker: {value!r}")
    return Requirement.UNKNOWN


def _get_string(data: Mapping[str, Any], key: str) -> str:
    """Get a string value from a mapping, "" when absent or not a string"""
    value = data.get(key)
    return value if isinstance(value, str) else ""


class FieldParser:
    """Parses raw field definitions into immutable FieldSpec trees"""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize FieldParser

        Args:
            max_depth: Maximum nesting depth; the top-level field counts as 1.
                Values above MAX_SUPPORTED_DEPTH are clamped.
        """
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        if max_depth > MAX_SUPPORTED_DEPTH:
            logger.warning(f"max_depth {max_depth} exceeds {MAX_SUPPORTED_DEPTH}, clamping")
            max_depth = MAX_SUPPORTED_DEPTH
        self.max_depth = max_depth

    def parse_field(self, name: str, raw: Any) -> FieldSpec:
        """
        Parse a single field definition

        Args:
            name: Field name
            raw: Field definition (e.g. {"type": "object", "properties": {...}})

        Returns:
            FieldSpec with nested children for objects and arrays of objects

        Raises:
            SchemaTooDeepError: If nesting exceeds max_depth
        """
        return self._parse(name, raw, path=name, depth=1)

    def parse_fields(self, raw_fields: Mapping[str, Any]) -> Tuple[FieldSpec, ...]:
        """Parse a field map into FieldSpecs sorted by name"""
        return self._parse_properties(raw_fields, path="", depth=1)

    def _parse(self, name: str, raw: Any, path: str, depth: int) -> FieldSpec:
        if depth > self.max_depth:
            raise SchemaTooDeepError(path, self.max_depth)

        if not isinstance(raw, Mapping):
            logger.debug(f"Field '{path}' is not an object, using defaults")
            raw = {}

        raw_type = _get_string(raw, "type")
        children: Tuple[FieldSpec, ...] = ()

        if raw_type == "array":
            raw_type, children = self._parse_array(raw.get("items"), path, depth)

        elif raw_type == "object":
            properties = raw.get("properties")
            if isinstance(properties, Mapping):
                children = self._parse_properties(properties, path, depth + 1)
            else:
                logger.debug(f"Field '{path}' is an opaque object")

        spec = FieldSpec(
            name=name,
            raw_type=raw_type,
            canonical_type=canonicalize(raw_type),
            required=parse_requirement(raw.get("required")),
            format=_get_string(raw, "format"),
            description=_get_string(raw, "description"),
            children=children,
        )
        logger.debug(f"Parsed field '{path}': {spec.raw_type} ({len(children)} children)")
        return spec

    def _parse_array(self, items: Any, path: str, depth: int) -> Tuple[str, Tuple[FieldSpec, ...]]:
        """Resolve an array's item schema into (raw_type, children)"""
        if not isinstance(items, Mapping):
            logger.debug(f"Array '{path}' has no item schema")
            return ARRAY_UNKNOWN, ()

        item_type = _get_string(items, "type")
        properties = items.get("properties")

        # Object items may be implicit: properties without "type": "object"
        if item_type == "object" or properties is not None:
            children: Tuple[FieldSpec, ...] = ()
            if isinstance(properties, Mapping):
                children = self._parse_properties(properties, path, depth + 1)
            return ARRAY_OBJECT, children

        if item_type:
            return ARRAY_PREFIX + item_type, ()

        logger.debug(f"Array '{path}' has an empty item type")
        return ARRAY_UNKNOWN, ()

    def _parse_properties(self, properties: Mapping[str, Any], path: str, depth: int) -> Tuple[FieldSpec, ...]:
        # Every property becomes a child; malformed definitions degrade to defaults
        children = []
        for prop_name in sorted(properties):
            child_path = f"{path}.{prop_name}" if path else prop_name
            children.append(self._parse(prop_name, properties[prop_name], child_path, depth))
        return tuple(children)


def parse_field(name: str, raw: Dict[str, Any], max_depth: int = DEFAULT_MAX_DEPTH) -> FieldSpec:
    """Parse a single field definition with a fresh FieldParser"""
    return FieldParser(max_depth).parse_field(name, raw)
