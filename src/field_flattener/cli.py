"""Command line interface entry point."""

from __future__ import annotations

import json
import sys
from dataclasses import replace

import click

from field_flattener.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from field_flattener.field_index import FieldIndexError, ProjectedCollection, project_collection
from field_flattener.field_sheet_generation import generate_field_workbook


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="field-flattener")
def cli() -> None:
    """Flatten nested CMS field definitions into storage-level fields."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="flatten")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--collection",
    "collection_slug",
    required=False,
    help="Only flatten the collection with this slug",
)
@click.option(
    "--include-presentational/--exclude-presentational",
    "include_presentational",
    default=None,
    help="Override flattening.include_presentational from the configuration.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Report field definitions that contributed nothing on stderr.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format for the flattened fields",
)
def flatten(
    config_path: str,
    collection_slug: str | None,
    include_presentational: bool | None,
    strict: bool,
    output_format: str,
) -> None:
    """Print the flattened fields of the configured collections."""
    configuration = _load(config_path)
    projected = _project(
        configuration,
        collection_slug=collection_slug,
        include_presentational=include_presentational,
        strict=strict,
    )

    for collection in projected:
        for diagnostic in collection.diagnostics:
            click.echo(f"{collection.slug}: {diagnostic.path}: {diagnostic.message}", err=True)

    if output_format == "json":
        payload = {
            collection.slug: [descriptor.as_dict() for descriptor in collection.descriptors]
            for collection in projected
        }
        click.echo(json.dumps(payload, indent=2))
        return

    for collection in projected:
        click.echo(f"# {collection.slug}")
        for descriptor in collection.descriptors:
            click.echo(
                "\t".join(
                    (
                        str(descriptor.position),
                        descriptor.name or "-",
                        descriptor.field_type or "-",
                        descriptor.kind,
                    )
                )
            )


@cli.command(name="export-sheet")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the field overview workbook to write",
)
def export_sheet(config_path: str, output_path: str) -> None:
    """Write the flattened fields of every collection to an Excel workbook."""
    configuration = _load(config_path)
    projected = _project(configuration)
    try:
        written_path = generate_field_workbook(configuration, projected, output_path)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written_path))


def _load(config_path: str) -> Configuration:
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _project(
    configuration: Configuration,
    *,
    collection_slug: str | None = None,
    include_presentational: bool | None = None,
    strict: bool = False,
) -> list[ProjectedCollection]:
    settings = configuration.flattening
    if include_presentational is not None:
        settings = replace(settings, include_presentational=include_presentational)
    if strict:
        settings = replace(settings, strict=True)

    collections = configuration.collections
    if collection_slug is not None:
        selected = configuration.collection(collection_slug)
        if selected is None:
            raise CliError(f"Unknown collection: {collection_slug}")
        collections = (selected,)

    try:
        return [project_collection(collection, settings) for collection in collections]
    except FieldIndexError as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
