"""
Notion Block Renderer - Turns processed documents into Notion API block JSON

Produces:
- A heading per section
- A 6-column field table (one row per field and per immediate child)
- Example payload code blocks, split into 2000-character rich text segments
"""

import logging
from typing import Any, Dict, List

from schemadoc.builder.example_synthesizer import to_example_json
from schemadoc.introspection.errors import ExampleSerializationError
from schemadoc.schema.models import DocumentModel, FieldRow, Requirement, SectionModel

logger = logging.getLogger(__name__)


# Notion rejects rich text content longer than this
MAX_TEXT_LENGTH = 2000

TABLE_HEADERS = ["Name", "", "Type", "Required", "Format", "Description"]
TABLE_WIDTH = len(TABLE_HEADERS)

LEGEND = "Special characters: —— ❌ —— ✅︎ ——"
EMPTY_SECTION_MESSAGE = "No fields defined for this section"

REQUIRED_GLYPHS = {
    Requirement.REQUIRED: "✅",
    Requirement.OPTIONAL: "❌",
    Requirement.UNKNOWN: "—",
}


def chunk_text(text: str, size: int = MAX_TEXT_LENGTH) -> List[str]:
    """Split text into sequential segments of at most `size` characters"""
    if size < 1:
        raise ValueError(f"size must be positive, got {size}")
    if not text:
        return [""]
    return [text[i:i + size] for i in range(0, len(text), size)]


def rich_text(content: str, **annotations) -> Dict[str, Any]:
    """Build a Notion rich text item"""
    item = {"type": "text", "text": {"content": content}}
    if annotations:
        item["annotations"] = annotations
    return item


class NotionBlockRenderer:
    """Renders DocumentModels as lists of Notion blocks"""

    def __init__(self, include_legend: bool = True):
        self.include_legend = include_legend

    def render(self, document: DocumentModel) -> List[Dict[str, Any]]:
        """
        Render a whole document

        Args:
            document: Processed document

        Returns:
            List of Notion block dicts, ready for the pages API
        """
        blocks = []
        if self.include_legend:
            blocks.append(self.paragraph(LEGEND))

        for section in document.sections:
            blocks.extend(self.render_section(section))

        logger.debug(f"Rendered {len(blocks)} blocks for {document.source or 'document'}")
        return blocks

    def render_section(self, section: SectionModel) -> List[Dict[str, Any]]:
        """Render heading, field table and example payload of one section"""
        blocks = [self.heading(section.title)]

        if section.error:
            blocks.append(self.paragraph(f"Error processing section: {section.error}", color="red"))
            return blocks

        blocks.append(self.table(section.rows()))

        if section.has_example:
            label = section.name.replace("_", " ").title()
            blocks.append(self.paragraph(f"Example {label}:"))
            blocks.append(self.example_block(section.example))

        return blocks

    def example_block(self, example: Any) -> Dict[str, Any]:
        """Code block holding the pretty-printed example payload"""
        try:
            content = to_example_json(example)
        except ExampleSerializationError as e:
            logger.error(str(e))
            content = str(e)
        return self.code(content)

    def table(self, rows: List[FieldRow]) -> Dict[str, Any]:
        """Field table with a header row"""
        children = [self._row([rich_text(header)] for header in TABLE_HEADERS)]

        if rows:
            children.extend(self._field_row(row) for row in rows)
        else:
            empty = [[rich_text(EMPTY_SECTION_MESSAGE, italic=True, color="gray")]]
            empty.extend([rich_text("")] for _ in range(TABLE_WIDTH - 1))
            children.append(self._row(empty))

        return {
            "object": "block",
            "type": "table",
            "table": {
                "table_width": TABLE_WIDTH,
                "has_column_header": True,
                "has_row_header": False,
                "children": children,
            },
        }

    def _field_row(self, row: FieldRow) -> Dict[str, Any]:
        spec = row.spec
        name_cell = [rich_text(spec.name, code=True, color="red")]
        blank_cell = [rich_text("")]

        # Children are indented into the second column
        first, second = (name_cell, blank_cell) if row.depth == 0 else (blank_cell, name_cell)

        return self._row([
            first,
            second,
            [rich_text(spec.canonical_type)],
            [rich_text(REQUIRED_GLYPHS[spec.required])],
            [rich_text(spec.format)],
            [rich_text(spec.description)],
        ])

    @staticmethod
    def _row(cells) -> Dict[str, Any]:
        return {
            "object": "block",
            "type": "table_row",
            "table_row": {"cells": list(cells)},
        }

    @staticmethod
    def heading(text: str) -> Dict[str, Any]:
        return {
            "object": "block",
            "type": "heading_1",
            "heading_1": {"rich_text": [rich_text(text)]},
        }

    @staticmethod
    def paragraph(text: str, **annotations) -> Dict[str, Any]:
        return {
            "object": "block",
            "type": "paragraph",
            "paragraph": {"rich_text": [rich_text(segment, **annotations) for segment in chunk_text(text)]},
        }

    @staticmethod
    def code(content: str, language: str = "json") -> Dict[str, Any]:
        return {
            "object": "block",
            "type": "code",
            "code": {
                "language": language,
                "rich_text": [rich_text(segment) for segment in chunk_text(content)],
            },
        }
