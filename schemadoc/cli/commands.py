"""Command implementations for the schemadoc CLI."""
from pathlib import Path
from typing import List, Optional

import click
from colorama import Fore, Style

from config import AppConfig
from schemadoc.api.notion_client import NotionClient
from schemadoc.builder.example_synthesizer import to_example_json
from schemadoc.exporter.json_exporter import JsonExporter
from schemadoc.introspection.errors import DocumentLoadError, ExampleSerializationError
from schemadoc.introspection.field_parser import FieldParser
from schemadoc.introspection.schema_walker import SchemaWalker
from schemadoc.parser.document_loader import load_document, load_documents
from schemadoc.renderer.notion_renderer import REQUIRED_GLYPHS, NotionBlockRenderer
from schemadoc.schema.models import DocumentModel


class DocumentationCLI:
    """Loads, processes and publishes field-schema documents."""

    def __init__(self, config: AppConfig):
        """Initialize CLI."""
        self.config = config
        self.walker = SchemaWalker(parser=FieldParser(config.max_depth))
        self.renderer = NotionBlockRenderer()
        self._client: Optional[NotionClient] = None

    @property
    def client(self) -> NotionClient:
        """Notion client, created on first use."""
        if self._client is None:
            self._client = NotionClient(self.config.notion)
        return self._client

    def print_header(self, title: str):
        """Print a section header."""
        click.echo(f"\n{Fore.CYAN}{'━' * 45}")
        click.echo(f"{Fore.CYAN}{title}")
        click.echo(f"{Fore.CYAN}{'━' * 45}{Style.RESET_ALL}\n")

    def process(self, path: Path) -> DocumentModel:
        """Load and walk one document."""
        document = load_document(path)
        return self.walker.walk(document, source=str(path))

    def publish(self, paths: List[str], title: str, dry_run: bool = False) -> int:
        """
        Publish one Notion page per input file.

        Returns:
            Number of files that failed
        """
        failures = 0

        for path, document in load_documents(paths):
            if isinstance(document, DocumentLoadError):
                click.echo(f"{Fore.RED}❌ {document}")
                failures += 1
                continue

            model = self.walker.walk(document, source=str(path))
            for section, error in model.errors.items():
                click.echo(f"{Fore.YELLOW}⚠️  {path}: section '{section}' skipped: {error}")

            blocks = self.renderer.render(model)

            if dry_run:
                click.echo(f"{Fore.YELLOW}[DRY RUN] {path}: {len(blocks)} blocks rendered")
                continue

            result = self.client.create_page(title, blocks)
            if result.success:
                click.echo(f"{Fore.GREEN}✅ Page created successfully for {path} with ID: {result.page_id}")
            else:
                click.echo(f"{Fore.RED}❌ Error creating Notion page for {path}: {result.error}")
                failures += 1

        return failures

    def preview(self, path: str) -> None:
        """Print field tables and example payloads of a document."""
        model = self.process(Path(path))

        for section in model.sections:
            self.print_header(section.title)

            if section.error:
                click.echo(f"{Fore.RED}Error: {section.error}")
                continue

            rows = section.rows()
            if not rows:
                click.echo(f"{Fore.WHITE}No fields defined for this section")

            for row in rows:
                spec = row.spec
                prefix = "  └─ " if row.depth else ""
                required = REQUIRED_GLYPHS[spec.required]
                click.echo(
                    f"{prefix}{Fore.RED}{spec.name}{Style.RESET_ALL} "
                    f"{Fore.CYAN}{spec.canonical_type or '?'}{Style.RESET_ALL} {required} "
                    f"{spec.format} {spec.description}".rstrip()
                )

            if section.has_example:
                click.echo(f"\n{Fore.YELLOW}Example:")
                try:
                    click.echo(to_example_json(section.example))
                except ExampleSerializationError as e:
                    click.echo(f"{Fore.RED}{e}")

    def export(self, path: str, output: Optional[str] = None) -> Path:
        """Export the canonical model of a document to JSON."""
        model = self.process(Path(path))

        output_file = Path(output) if output else Path(self.config.output_dir) / f"{Path(path).stem}.model.json"
        JsonExporter().export(output_file, model)
        return output_file
