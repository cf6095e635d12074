"""CLI utilities."""

from pathlib import Path
from typing import Any

import click

from tsdecl.config.models import TsdeclConfig
from tsdecl.core.errors import TsdeclError
from tsdecl.parsing import load_source
from tsdecl.syntax.kinds import KindTable


def get_config(ctx: click.Context) -> TsdeclConfig:
    obj = ctx.find_object(dict) or {}
    config = obj.get("config")
    return config if isinstance(config, TsdeclConfig) else TsdeclConfig()


def load_inputs(path: Path, kinds_path: Path | None, config: TsdeclConfig) -> tuple[Any, KindTable]:
    """Load the raw AST and kind table for a command.

    Raises:
        click.ClickException: If the source or kind table cannot be loaded
    """
    table_path = kinds_path or (Path(config.kinds.table_path) if config.kinds.table_path else None)
    try:
        kinds = KindTable.load(table_path) if table_path is not None else KindTable()
        ast = load_source(path)
    except TsdeclError as e:
        raise click.ClickException(str(e)) from e
    return ast, kinds
