#!/usr/bin/env python3
"""schemadoc - Entry point."""
import logging
import sys

import click
from colorama import Fore, Style, init

from config import app_config
from schemadoc import __version__
from schemadoc.cli.commands import DocumentationCLI
from schemadoc.introspection.errors import DocumentLoadError

# Initialize colorama
init(autoreset=True)


def print_banner():
    """Print application banner."""
    click.echo(f"{Fore.CYAN}{'=' * 44}")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}schemadoc{Fore.CYAN}                            ║")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}API Field Schema Documentation{Fore.CYAN}       ║")
    click.echo(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
    click.echo()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """schemadoc - Document API field schemas and their example payloads."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path())
@click.option("--title", default=app_config.page_title, show_default=True, help="Title for the Notion page")
@click.option("--dry-run", is_flag=True, help="Render blocks without calling the Notion API")
def publish(files, title, dry_run):
    """Publish a Notion page for each JSON schema file."""
    print_banner()

    cli_tool = DocumentationCLI(app_config)
    failures = cli_tool.publish(list(files), title, dry_run=dry_run)

    if failures:
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True))
def preview(file):
    """Show field tables and example payloads in the terminal."""
    print_banner()

    cli_tool = DocumentationCLI(app_config)
    try:
        cli_tool.preview(file)
    except DocumentLoadError as e:
        click.echo(f"{Fore.RED}❌ {e}")
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True))
@click.option("--output", "-o", type=click.Path(), help="Output JSON file")
def export(file, output):
    """Export the canonical field model and examples to JSON."""
    cli_tool = DocumentationCLI(app_config)
    try:
        output_file = cli_tool.export(file, output)
    except DocumentLoadError as e:
        click.echo(f"{Fore.RED}❌ {e}")
        sys.exit(1)

    click.echo(f"{Fore.GREEN}✅ Exported to {output_file}")


if __name__ == "__main__":
    cli()
