"""Command-line interface for gql-tsgen."""

import logging
from dataclasses import replace
from pathlib import Path

import click
from graphql import GraphQLError

from .core.errors import BuilderError
from .core.hooks import AddHeaderHook, HookRunner
from .core.options import BuilderOptions
from .core.runner import run_all_builder
from .core.scalars import parse_scalar_option


def _parse_scalars(ctx, param, values) -> dict[str, str]:
    scalars = {}
    for value in values:
        try:
            name, ts_type = parse_scalar_option(value)
        except ValueError as e:
            raise click.BadParameter(str(e), ctx=ctx, param=param)
        scalars[name] = ts_type
    return scalars


@click.group()
@click.version_option(package_name="gql-tsgen")
def main():
    """TypeScript type generator for GraphQL operations.

    Generate result and variables types for queries and mutations.
    """
    pass


@main.command()
@click.argument("models", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--query",
    "-q",
    "queries",
    required=True,
    multiple=True,
    type=click.Path(exists=True),
    help="GraphQL file or directory with the operations to render. Repeatable.",
)
@click.option(
    "--scalar",
    "-s",
    "scalars",
    multiple=True,
    callback=_parse_scalars,
    help="Scalar mapping as Name:tsType (tsType defaults to any). Repeatable.",
)
@click.option(
    "--loose",
    "-l",
    is_flag=True,
    help="Render invalid shapes, missing fields and unknown types with markers.",
)
@click.option(
    "--strict-arguments",
    is_flag=True,
    help="Fail on arguments the model does not declare.",
)
@click.option(
    "--header",
    default=None,
    help="Header to prepend to the generated file.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Output file for generated code (default: stdout).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    models: tuple[str, ...],
    queries: tuple[str, ...],
    scalars: dict[str, str],
    loose: bool,
    strict_arguments: bool,
    header: str | None,
    output: str | None,
    verbose: bool,
):
    """Generate TypeScript types for GraphQL operations.

    Examples:

        gql-tsgen generate -q ./queries ./schema.graphql

        gql-tsgen generate -q comments.graphql -s AWSDateTime:string -o types.ts ./schema
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        for model in models:
            click.echo(f"Model: {Path(model).resolve()}", err=True)
        for query in queries:
            click.echo(f"Query: {Path(query).resolve()}", err=True)
        for name, ts_type in scalars.items():
            click.echo(f"  Scalar {name}: {ts_type}", err=True)

    options = BuilderOptions.loose() if loose else BuilderOptions()
    if strict_arguments:
        options = replace(options, strict_arguments=True)

    hooks = HookRunner()
    if header:
        hooks.add_post_hook(AddHeaderHook(header))

    output_name = Path(output).name if output else "types.ts"
    click.echo("Generating types...", err=True)
    try:
        code = run_all_builder(
            list(models),
            list(queries),
            options=options,
            scalars=scalars,
            hooks=hooks,
            output_name=output_name,
        )
    except (BuilderError, GraphQLError) as e:
        raise click.ClickException(str(e))

    if verbose:
        click.echo(f"  Lines: {len(code.splitlines())}", err=True)
        click.echo(f"  Operations: {code.count('export const ')}", err=True)

    if output is None:
        click.echo(code, nl=False)
        return

    output_path = Path(output).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(code)
    click.echo(f"Done! Output: {output_path}", err=True)


if __name__ == "__main__":
    main()
