"""tsdecl walk command - print the declaration tree of a file."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.tree import Tree

from tsdecl.cli.utils import get_config, load_inputs
from tsdecl.declarations.models import ContextNode, DeclarationNode
from tsdecl.walk.walker import walk_tree


def build_tree(node: ContextNode, label: str | None = None) -> Tree:
    """Render a context node and its children as a rich Tree."""
    tree = Tree(f"[bold]{label or node.name}[/bold] [dim]({node.kind})[/dim]")
    _add_children(tree, node)
    return tree


def _add_children(tree: Tree, node: ContextNode) -> None:
    for key, child in node.children.items():
        if isinstance(child, ContextNode):
            branch = tree.add(f"[bold]{key}[/bold] [dim]({child.kind})[/dim]")
            _add_children(branch, child)
        else:
            tree.add(_leaf_label(key, child))


def _leaf_label(key: str, child: DeclarationNode) -> str:
    details = child.to_dict()
    extra = details.get("declaration") or details.get("keyword") or details.get("module") or ""
    suffix = f" [dim]{extra}[/dim]" if extra else ""
    return f"{key} [cyan]{child.kind}[/cyan]{suffix}"


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "tree"]),
    default=None,
    help="Output format (default from config: json)",
)
@click.option(
    "--kinds",
    "kinds_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="SyntaxKind table for ASTs with numeric kinds",
)
@click.option(
    "--namespace-mode",
    type=click.Choice(["flat", "stack"]),
    default=None,
    help="Namespace scope policy (default from config: flat)",
)
@click.pass_context
def walk_command(
    ctx: click.Context,
    path: Path,
    output_format: str | None,
    kinds_path: Path | None,
    namespace_mode: str | None,
) -> None:
    """Print the declaration tree of PATH.

    PATH is a TypeScript source file (.ts, .tsx, .mts, .cts) or a JSON
    dump of a compiler AST.
    """
    config = get_config(ctx)
    ast, kinds = load_inputs(path, kinds_path, config)
    result = walk_tree(
        ast,
        kinds=kinds,
        config=config.walk,
        namespace_mode=namespace_mode,  # type: ignore[arg-type]
    )

    if (output_format or config.output.format) == "tree":
        Console().print(build_tree(result.root, label=path.name))
    else:
        click.echo(json.dumps(result.root.to_dict(), indent=config.output.indent or None))
