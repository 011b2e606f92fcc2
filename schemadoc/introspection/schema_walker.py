"""
Schema Walker - Iterates the sections of a field-schema document.

Supports:
- Well-known sections (path params, query params, request body, response)
- Arbitrary extra sections, in document order
- Fields under a "fields" key or inlined at the section root
- Per-section failure isolation for over-deep schemas
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from schemadoc.builder.example_synthesizer import ExampleSynthesizer
from schemadoc.schema.models import DocumentModel, FieldSpec, SectionModel
from .errors import SchemaTooDeepError
from .field_parser import FieldParser

logger = logging.getLogger(__name__)


# Well-known sections, rendered first and in this order
KNOWN_SECTIONS = ("param", "query", "request_body", "response")

# Fixed titles; extra sections are numbered after these
SECTION_TITLES = {
    "param": "1. Path Parameters",
    "query": "2. Query Parameters",
    "request_body": "3. Request Body",
    "response": "4. Response",
}

# Sections that get a synthesized example payload
EXAMPLE_SECTIONS = ("request_body", "response")

FIELDS_KEY = "fields"

# Section-root keys that describe the section itself and are never fields,
# even when their value happens to carry a "type" key.
SECTION_METADATA_KEYS = frozenset({
    FIELDS_KEY,
    "title",
    "description",
    "summary",
    "content_type",
    "example",
    "examples",
})


class SchemaWalker:
    """Runs the field parser and example synthesizer over every section of a document"""

    def __init__(
        self,
        parser: Optional[FieldParser] = None,
        synthesizer: Optional[ExampleSynthesizer] = None,
        example_sections: Iterable[str] = EXAMPLE_SECTIONS,
    ):
        self.parser = parser or FieldParser()
        self.synthesizer = synthesizer or ExampleSynthesizer()
        self.example_sections = tuple(example_sections)

    def walk(self, document: Mapping[str, Any], source: str = "") -> DocumentModel:
        """
        Process every section of a document

        Args:
            document: Mapping of section name -> section object
            source: Label of the document (e.g. its file path), for reporting

        Returns:
            DocumentModel with known sections first, then extras in document order
        """
        model = DocumentModel(source=source)

        extra_number = len(KNOWN_SECTIONS)

        for name in self._ordered_sections(document):
            section_data = document[name]
            if not isinstance(section_data, Mapping):
                logger.warning(f"Skipping section '{name}' in {source or 'document'}: not an object")
                continue

            if name in SECTION_TITLES:
                title = SECTION_TITLES[name]
            else:
                extra_number += 1
                title = f"{extra_number}. {section_title(name)}"
            model.sections.append(self.walk_section(name, title, section_data))

        logger.info(f"Processed {len(model.sections)} sections from {source or 'document'}")
        return model

    def walk_section(self, name: str, title: str, section_data: Mapping[str, Any]) -> SectionModel:
        """Parse one section's fields and, for example sections, synthesize its payload"""
        section = SectionModel(name=name, title=title)

        try:
            section.fields = self.parse_section_fields(section_data)
        except SchemaTooDeepError as e:
            logger.error(f"Section '{name}': {e}")
            section.error = str(e)
            return section

        if name in self.example_sections and section.fields:
            section.example = self.synthesizer.synthesize_fields(section.fields)
            section.has_example = True

        return section

    def parse_section_fields(self, section_data: Mapping[str, Any]) -> Tuple[FieldSpec, ...]:
        """Parse the field map of a section into FieldSpecs sorted by name"""
        return self.parser.parse_fields(extract_field_map(section_data))

    @staticmethod
    def _ordered_sections(document: Mapping[str, Any]):
        known = [name for name in KNOWN_SECTIONS if name in document]
        extra = [name for name in document if name not in KNOWN_SECTIONS]
        return known + extra


def extract_field_map(section_data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Extract the raw field map of a section

    Two paths:
    - A "fields" key, when present, is the field map (and only source of fields)
    - Otherwise, root entries that are objects carrying a "type" key are fields;
      SECTION_METADATA_KEYS and entries without "type" are ignored
    """
    if FIELDS_KEY in section_data:
        fields = section_data[FIELDS_KEY]
        if not isinstance(fields, Mapping):
            logger.warning(f"Section '{FIELDS_KEY}' is not an object, no fields extracted")
            return {}
        return dict(fields)

    found = {}
    for key, value in section_data.items():
        if key in SECTION_METADATA_KEYS:
            continue
        if isinstance(value, Mapping) and "type" in value:
            found[key] = value
        else:
            logger.debug(f"Ignoring non-field entry '{key}' in section root")

    if found:
        logger.debug(f"Found {len(found)} fields in section root")
    return found


def section_title(name: str) -> str:
    """Display title of a section ("request_body" -> "Request Body")"""
    if name in SECTION_TITLES:
        return SECTION_TITLES[name].split(". ", 1)[1]
    return name.replace("_", " ").title()


def walk_document(document: Mapping[str, Any], source: str = "", max_depth: Optional[int] = None) -> DocumentModel:
    """Process a document with a default walker"""
    parser = FieldParser(max_depth) if max_depth is not None else None
    return SchemaWalker(parser=parser).walk(document, source)
