"""Command-line interface for gql-tsgen."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from .core.config import DEFAULT_OPERATION_ROOTS, GeneratorConfig
from .core.errors import GqlTsgenError
from .core.generator import TypeScriptGenerator
from .core.hooks import AddHeaderHook, FilterTypesHook, HookRunner
from .core.scalars import DEFAULT_OPAQUE_SCALARS


def parse_scalar_mappings(ctx, param, values: tuple[str, ...]) -> dict[str, str]:
    """Click callback turning NAME=TYPE options into a mapping."""
    mappings = {}
    for value in values:
        name, sep, ts_type = value.partition("=")
        if not sep or not name.strip() or not ts_type.strip():
            raise click.BadParameter(f"expected NAME=TYPE, got {value!r}", ctx=ctx, param=param)
        mappings[name.strip()] = ts_type.strip()
    return mappings


@click.group()
@click.version_option(package_name="gql-tsgen")
def main():
    """GraphQL to TypeScript type generator.

    Generate TypeScript declarations from GraphQL schemas.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or directory.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output file for the declarations. An existing directory, or a path "
    "ending in a separator, receives schema.d.ts.",
)
@click.option(
    "--scalar",
    "scalars",
    multiple=True,
    callback=parse_scalar_mappings,
    metavar="NAME=TYPE",
    help="TypeScript type for a custom scalar (repeatable).",
)
@click.option(
    "--opaque",
    multiple=True,
    metavar="NAME",
    help=f"Scalar typed by hand and left out of the output (repeatable, default: "
    f"{', '.join(sorted(DEFAULT_OPAQUE_SCALARS))}).",
)
@click.option(
    "--root",
    "roots",
    multiple=True,
    metavar="NAME",
    help=f"Operation root type to leave out (repeatable, default: "
    f"{', '.join(sorted(DEFAULT_OPERATION_ROOTS))}).",
)
@click.option("--header", help="Header text written above the declarations.")
@click.option("--exclude-prefix", help="Skip definitions whose name starts with this prefix.")
@click.option(
    "--template-dir",
    type=click.Path(file_okay=False),
    help="Directory with templates overriding the built-in ones.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output: str,
    scalars: dict[str, str],
    opaque: tuple[str, ...],
    roots: tuple[str, ...],
    header: str | None,
    exclude_prefix: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate TypeScript declarations from a GraphQL schema.

    Examples:

        gql-tsgen generate --schema ./schema.graphql --output ./schema.d.ts

        gql-tsgen generate -s ./schema -o ./src/types/ --scalar DateTime=string
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    settings = {"scalars": scalars, "template_dir": template_dir}
    if opaque:
        settings["opaque_scalars"] = frozenset(opaque)
    if roots:
        settings["operation_roots"] = frozenset(roots)
    try:
        config = GeneratorConfig(**settings)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    hooks = HookRunner()
    if exclude_prefix:
        hooks.add_pre_hook(FilterTypesHook(exclude_prefix=exclude_prefix))
    if header:
        hooks.add_post_hook(AddHeaderHook(header))

    if verbose:
        click.echo(f"Schema: {schema_path}")
        click.echo(f"Output: {output_path}")

    click.echo("Generating declarations...")
    generator = TypeScriptGenerator(config, hooks)
    try:
        written = generator.generate(schema_path, output)
    except GqlTsgenError as e:
        raise click.ClickException(e.message) from e

    click.echo(f"Done! Generated declarations in {written}")


if __name__ == "__main__":
    main()
