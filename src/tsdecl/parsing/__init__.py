"""Front ends that turn files into raw AST mappings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from tsdecl.core.errors import SourceError
from tsdecl.parsing.json_ast import load_ast_json, parse_ast_json
from tsdecl.parsing.treesitter import LANGUAGE_FUNCS, ParseResult, TypeScriptParser

JSON_SUFFIXES = frozenset({".json"})


def load_source(path: Path, parser: TypeScriptParser | None = None) -> dict[str, Any]:
    """Load a raw AST from a JSON dump or a TypeScript source file."""
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return load_ast_json(path)
    if suffix in LANGUAGE_FUNCS:
        return (parser or TypeScriptParser()).parse(path).ast
    raise SourceError.unsupported(str(path), suffix)


__all__ = [
    "JSON_SUFFIXES",
    "LANGUAGE_FUNCS",
    "ParseResult",
    "TypeScriptParser",
    "load_ast_json",
    "load_source",
    "parse_ast_json",
]
