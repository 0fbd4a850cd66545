"""Command-line interface for gql-sdlgen."""

import click
from pathlib import Path
from pydantic import ValidationError

from . import __version__
from .core.diagnostics import DescriptorError
from .core.discovery import discover
from .core.generator import SchemaGenerator
from .core.hooks import AddHeaderHook, FilterTypesHook, HookRunner
from .core.manifest import load_manifest
from .utils.logging import get_logger, setup_logging

logger = get_logger("cli")


@click.group()
@click.version_option(__version__, prog_name="gql-sdlgen")
def main():
    """GraphQL SDL generator for Python.

    Generate a GraphQL schema from annotated Python classes or a JSON manifest.
    """
    pass


@main.command()
@click.option(
    "--package",
    "-p",
    "packages",
    multiple=True,
    help="Python package or module to scan for @graphql_schema classes (repeatable).",
)
@click.option(
    "--manifest",
    "-m",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON manifest of type descriptors.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file for the generated schema (default: stdout).",
)
@click.option(
    "--header",
    help="Header comment written at the top of the schema.",
)
@click.option(
    "--exclude-prefix",
    help="Skip types whose operation name starts with this prefix.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: $GQL_SDLGEN_LOG_LEVEL or WARNING).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    packages: tuple[str, ...],
    manifest: str | None,
    output: str | None,
    header: str | None,
    exclude_prefix: str | None,
    log_level: str | None,
    verbose: bool,
):
    """Generate a GraphQL schema.

    Packages are scanned first, in the order given, then manifest types
    are appended.

    Examples:

        gql-sdlgen generate --package app.dto --output schema.graphqls

        gql-sdlgen generate -m types.json

        gql-sdlgen generate -p app.dto -p app.inputs --header "Generated - do not edit"
    """
    setup_logging(log_level)
    if not packages and not manifest:
        raise click.UsageError("Provide at least one --package or a --manifest.")

    descriptors = []
    diagnostics = []

    if packages:
        if verbose:
            click.echo(f"Scanning {', '.join(packages)}...", err=True)
        try:
            found = discover(*packages)
        except ImportError as e:
            raise click.ClickException(f"Cannot import package: {e}")
        except DescriptorError as e:
            raise click.ClickException(f"Invalid schema class: {e}")
        descriptors.extend(found.descriptors)
        diagnostics.extend(found.diagnostics)

    if manifest:
        if verbose:
            click.echo(f"Loading manifest {manifest}...", err=True)
        try:
            descriptors.extend(load_manifest(manifest))
        except (ValidationError, DescriptorError) as e:
            raise click.ClickException(f"Invalid manifest {manifest}:\n{e}")

    hooks = HookRunner()
    if exclude_prefix:
        hooks.add_pre_hook(FilterTypesHook(exclude_prefix=exclude_prefix))
    if header:
        hooks.add_post_hook(AddHeaderHook(header))

    result = SchemaGenerator(hooks=hooks).generate(descriptors)
    diagnostics.extend(result.diagnostics)

    if verbose:
        click.echo(f"  Types: {result.type_count}", err=True)
        click.echo(f"  Skipped elements: {len(diagnostics)}", err=True)
        for diagnostic in diagnostics:
            click.echo(f"  {diagnostic}", err=True)

    if output:
        output_path = Path(output).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.sdl)
        logger.info("Wrote schema to %s", output_path)
        click.echo(f"Done! Generated schema in {output_path}", err=True)
    else:
        click.echo(result.sdl, nl=False)


if __name__ == "__main__":
    main()
