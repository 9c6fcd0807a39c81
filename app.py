#!/usr/bin/env python3

import json
import sys
from pathlib import Path

import click
import yaml
from dotenv import load_dotenv

from productmeta.config import get_settings
from productmeta.error_details import get_error_human_message
from productmeta.errors import ProductMetadataError
from productmeta.metadata import ProductMetadataResolver, load_document_title
from productmeta.overrides import OverrideStore
from productmeta.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_store(overrides_dir) -> OverrideStore:
    settings = get_settings().overrides
    if overrides_dir:
        settings = settings.model_copy(update={"directory": Path(overrides_dir)})
    return OverrideStore.from_settings(settings)


def fail(error: Exception) -> None:
    logger.error("Product metadata resolution failed", error=str(error))
    click.echo(get_error_human_message(error), err=True)
    sys.exit(1)


def dump(data, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(data, indent=2)
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip()


overrides_dir_option = click.option(
    "--overrides-dir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True),
    help="Directory with one override folder per package path "
    "(default: OVERRIDES_DIRECTORY or ./overrides)",
)
format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    help="Output format",
)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """Product metadata resolution for provider code generation"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("package_path")
@click.option("--title", help="API document title, e.g. 'Compute/Instance'")
@click.option(
    "--document",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    help="API document (YAML or JSON) to read info.title from",
)
@overrides_dir_option
@format_option
def resolve(package_path, title, document, overrides_dir, output_format) -> None:
    """Resolve the product metadata of a package"""
    if (title is None) == (document is None):
        raise click.UsageError("Exactly one of --title or --document is required")

    try:
        if document:
            title = load_document_title(document)
        resolver = ProductMetadataResolver(build_store(overrides_dir))
        metadata = resolver.resolve(title, package_path)
        output = dump(metadata.as_dict(), output_format)
    except (ProductMetadataError, FileNotFoundError, ValueError) as e:
        fail(e)
        return

    click.echo(output)


@cli.command("show-overrides")
@click.argument("package_path")
@overrides_dir_option
@format_option
def show_overrides(package_path, overrides_dir, output_format) -> None:
    """List the product overrides declared for a package"""
    try:
        overrides = build_store(overrides_dir).ensure_loaded(package_path)
    except (ProductMetadataError, ValueError) as e:
        fail(e)
        return

    records = [
        {"type": record.type, "details": record.details}
        for record in overrides.product_overrides()
    ]
    if not records:
        click.echo(f"No product overrides declared for {package_path}")
        return
    click.echo(dump(records, output_format))


def main() -> None:
    load_dotenv()
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
