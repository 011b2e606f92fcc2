"""Models for the canonical field tree and processed documents."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Requirement(str, Enum):
    """Tri-state required marker of a field."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    UNKNOWN = "unknown"  # schema omitted the marker


@dataclass(frozen=True)
class FieldRow:
    """One renderable row: a field (depth 0) or one of its immediate children (depth 1)."""

    depth: int
    spec: "FieldSpec"


@dataclass(frozen=True)
class FieldSpec:
    """Canonical representation of one schema field."""

    name: str
    raw_type: str  # "object", "array_object", "[]integer", "uint64", ...
    canonical_type: str
    required: Requirement = Requirement.UNKNOWN
    format: str = ""
    description: str = ""
    children: Tuple["FieldSpec", ...] = ()

    def is_structured(self) -> bool:
        """Check if field can carry children (object or array of objects)."""
        return self.raw_type in ("object", "array_object")

    def get_child(self, name: str) -> Optional["FieldSpec"]:
        """Return an immediate child by name."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def flatten(self) -> List[FieldRow]:
        """Row model used by renderers: the field plus its immediate children only."""
        rows = [FieldRow(depth=0, spec=self)]
        rows.extend(FieldRow(depth=1, spec=child) for child in self.children)
        return rows

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "name": self.name,
            "raw_type": self.raw_type,
            "canonical_type": self.canonical_type,
            "required": self.required.value,
            "format": self.format,
            "description": self.description,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class SectionModel:
    """Parsed fields and example payload of one document section."""

    name: str
    title: str
    fields: Tuple[FieldSpec, ...] = ()
    example: Any = None
    has_example: bool = False
    error: Optional[str] = None

    def rows(self) -> List[FieldRow]:
        """Flattened rows for every field of the section."""
        rows = []
        for spec in self.fields:
            rows.extend(spec.flatten())
        return rows

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data = {
            "name": self.name,
            "title": self.title,
            "fields": [spec.to_dict() for spec in self.fields],
            "error": self.error,
        }
        if self.has_example:
            data["example"] = self.example
        return data


@dataclass
class DocumentModel:
    """All sections of one processed input document."""

    source: str = ""
    sections: List[SectionModel] = field(default_factory=list)

    def get_section(self, name: str) -> Optional[SectionModel]:
        """Return section by name."""
        for section in self.sections:
            if section.name == name:
                return section
        return None

    @property
    def errors(self) -> Dict[str, str]:
        """Per-section errors, keyed by section name."""
        return {s.name: s.error for s in self.sections if s.error}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "source": self.source,
            "sections": [section.to_dict() for section in self.sections],
        }
