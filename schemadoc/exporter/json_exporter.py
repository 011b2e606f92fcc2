"""JSON exporter."""
import json
from datetime import datetime
from pathlib import Path

from schemadoc.schema.models import DocumentModel


class JsonExporter:
    """Export the canonical field model and examples to JSON."""

    def export(self, output_file: Path, document: DocumentModel) -> None:
        """Export to JSON file."""
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "metadata": {
                "created_at": datetime.now().isoformat(),
                "source": document.source,
                "sections": len(document.sections),
                "errors": document.errors,
            },
            **document.to_dict(),
        }

        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False, default=str)
