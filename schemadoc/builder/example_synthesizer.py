"""
Example Synthesizer - Builds deterministic example payloads from FieldSpec trees

Every canonical type maps to a fixed placeholder value. Types without a rule
synthesize to None so a gap in coverage never aborts a whole example.
"""

import json
import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from schemadoc.introspection.errors import ExampleSerializationError
from schemadoc.introspection.field_parser import FieldParser
from schemadoc.introspection.type_canonicalizer import CanonicalType, element_type, is_array_type
from schemadoc.schema.models import FieldSpec

logger = logging.getLogger(__name__)


EXAMPLE_DATE = "20240901"
EXAMPLE_TIME = "14:26:00"
EXAMPLE_TIMESTAMP = "2024-09-01T14:26:00+09:00"
EXAMPLE_STRING = "example_string"
EXAMPLE_INT = 0
EXAMPLE_NUMBER = 0.0
EXAMPLE_BOOLEAN = False

# Number of elements in a synthesized array of scalars
SCALAR_ARRAY_LENGTH = 2

STRING_FORMATS = {
    "YYYYMMDD": EXAMPLE_DATE,
    "HHMM": EXAMPLE_TIME,
    "ISO8601": EXAMPLE_TIMESTAMP,
}

NUMBER_TYPES = {"number", "float", "float32", "float64", "double"}


class ExampleSynthesizer:
    """Synthesizes example JSON values for canonical field types"""

    def synthesize(self, field: FieldSpec) -> Any:
        """
        Build an example value for a field

        Args:
            field: Parsed field

        Returns:
            JSON-compatible value, or None when no rule applies to the type
        """
        return self._synthesize_type(field.canonical_type, field)

    def synthesize_fields(self, fields: Iterable[FieldSpec]) -> Dict[str, Any]:
        """Build an example object keyed by field name"""
        return {field.name: self.synthesize(field) for field in fields}

    def synthesize_raw(
        self,
        raw_fields: Mapping[str, Any],
        parser: Optional[FieldParser] = None,
    ) -> Dict[str, Any]:
        """Build an example object straight from a raw field map"""
        parser = parser or FieldParser()
        return self.synthesize_fields(parser.parse_fields(raw_fields))

    def _synthesize_type(self, canonical: str, field: FieldSpec) -> Any:
        if canonical == CanonicalType.STRING:
            return self._synthesize_string(field.format)

        if canonical == CanonicalType.INT:
            return EXAMPLE_INT

        if canonical in NUMBER_TYPES:
            return EXAMPLE_NUMBER

        if canonical == CanonicalType.BOOLEAN:
            return EXAMPLE_BOOLEAN

        if canonical == CanonicalType.DATETIME:
            return EXAMPLE_TIMESTAMP

        if canonical == CanonicalType.OBJECT:
            return self.synthesize_fields(field.children)

        if canonical == CanonicalType.ARRAY_OBJECT:
            return [self.synthesize_fields(field.children)]

        if is_array_type(canonical):
            element = self._synthesize_type(element_type(canonical), field)
            if element is None:
                logger.debug(f"No example rule for elements of '{field.name}' ({canonical})")
                return None
            return [element] * SCALAR_ARRAY_LENGTH

        logger.debug(f"No example rule for '{field.name}' ({canonical!r})")
        return None

    @staticmethod
    def _synthesize_string(fmt: str) -> str:
        if not fmt:
            return EXAMPLE_STRING
        if fmt in STRING_FORMATS:
            return STRING_FORMATS[fmt]
        return f"example_{fmt}"


def synthesize(field: FieldSpec) -> Any:
    """Build an example value for a field"""
    return ExampleSynthesizer().synthesize(field)


def to_example_json(value: Any) -> str:
    """
    Serialize an example payload for display

    Pretty-printed with a 4-space indent and sorted keys.

    Raises:
        ExampleSerializationError: If the value is not JSON-serializable
    """
    try:
        return json.dumps(value, indent=4, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ExampleSerializationError(f"Error creating example: {e}") from e
