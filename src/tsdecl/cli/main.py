"""tsdecl CLI - tsdecl command."""

from pathlib import Path

import click

from tsdecl import __version__
from tsdecl.cli.dump import dump_command
from tsdecl.cli.walk import walk_command
from tsdecl.config.loader import load_config
from tsdecl.core.errors import TsdeclError
from tsdecl.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="tsdecl")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file to use instead of ./.tsdecl.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """tsdecl - Declaration trees from TypeScript ASTs."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path=config_path)
    except TsdeclError as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose


cli.add_command(walk_command, name="walk")
cli.add_command(dump_command, name="dump")


if __name__ == "__main__":
    cli()
