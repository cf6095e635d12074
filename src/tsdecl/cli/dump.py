"""tsdecl dump command - print the normalized AST of a file."""

import json
from pathlib import Path

import click

from tsdecl.cli.utils import get_config, load_inputs
from tsdecl.syntax.normalize import strip_details_from_tree


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--kinds",
    "kinds_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="SyntaxKind table for ASTs with numeric kinds",
)
@click.option("--statement", type=int, default=None, help="Dump only the Nth top-level statement")
@click.pass_context
def dump_command(
    ctx: click.Context, path: Path, kinds_path: Path | None, statement: int | None
) -> None:
    """Print the AST of PATH without positions, flags or parent links."""
    config = get_config(ctx)
    ast, kinds = load_inputs(path, kinds_path, config)

    node = ast
    if statement is not None:
        statements = ast.get("statements") or []
        if not 0 <= statement < len(statements):
            raise click.ClickException(
                f"Statement index {statement} out of range (file has {len(statements)})"
            )
        node = statements[statement]

    normalized = strip_details_from_tree(node, kinds)
    click.echo(json.dumps(normalized, indent=config.output.indent or None))
