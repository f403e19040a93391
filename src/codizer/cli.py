"""CLI entry point for codizer."""

import logging
from datetime import datetime
from pathlib import Path

import click

from codizer.config import ConfigError, load_settings
from codizer.families import FAMILIES, get_family
from codizer.generator.document import DocumentGenerator
from codizer.generator.enrich import build_enricher, identity
from codizer.parser.base import Diagnostic


def _format_diagnostic(diagnostic: Diagnostic) -> str:
    if diagnostic.kind == "schema_mismatch":
        return f"Tag parsing error (offset {diagnostic.offset}): {diagnostic.message}"
    return f"Enrichment failed (offset {diagnostic.offset}), using original description: {diagnostic.message}"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Generate Markdown documentation from //codizer and //promizer comment tags."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.option("-i", "--input", "input_path", default=None, type=click.Path(path_type=Path), help="Input file to analyze.")
@click.option("--family", default="codizer", type=click.Choice(sorted(FAMILIES)), help="Tag family to document.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output Markdown file path.")
@click.option("--suffix", default=None, help="Suffix appended to the input path to name the output file.")
@click.option("--model", default=None, help="LLM model used to enrich descriptions.")
@click.option("--no-enhance", is_flag=True, help="Disable description enrichment.")
@click.option("--config", "config_path", default=None, type=click.Path(path_type=Path), help="YAML configuration file.")
def gen(input_path: Path | None, family: str, output: Path | None, suffix: str | None, model: str | None, no_enhance: bool, config_path: Path | None):
    """Analyze tags in a source file and generate documentation."""
    if input_path is None:
        raise click.UsageError("Please specify an input file with -i/--input.")

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if model:
        settings = settings.model_copy(update={"model": model})

    try:
        contents = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Could not read file: {input_path}") from e

    tag_family = get_family(family)
    enricher = identity if no_enhance else build_enricher(settings)
    generator = DocumentGenerator(tag_family, enricher=enricher)
    result = generator.generate(contents, updated_at=datetime.now())

    for diagnostic in result.diagnostics:
        click.echo(_format_diagnostic(diagnostic), err=True)
    click.echo(f"Found {result.rendered} {tag_family.marker} tags.")

    output_path = output or tag_family.output_path(
        input_path, suffix if suffix is not None else settings.output_suffixes.get(tag_family.name)
    )
    try:
        output_path.write_text(result.markdown, encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"Error writing file: {output_path}") from e
    click.echo(f"Documentation file created: {output_path}")


@main.command()
def families():
    """List the supported tag families."""
    for tag_family in FAMILIES.values():
        shapes = ", ".join(variant.field_schema.name for variant in tag_family.variants)
        click.echo(f"{tag_family.name}: //{tag_family.marker}(...) [{shapes}] -> <input>{tag_family.output_suffix}")
